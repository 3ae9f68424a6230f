#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Wiki URL helpers — page titles and canonical page URLs on a Wikimedia-style
wiki (https://{lang}.{project}.org/wiki/{title}).
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from wikisummary.core.config import get_settings


# -----------------------------------------------------------------------------

def project_domain(lang: str, project: str) -> str:
    return f"{lang}.{project}.org"


def wiki_url(domain: str, target: str) -> str:
    return f"https://{domain}/wiki/{target}"


# -----------------------------------------------------------------------------

def page_title(title: str, namespace: int = 0, underscored: bool = False) -> str:
    """
    Full page title for a (namespace, title) pair.

    Only the Draft namespace gets a prefix.  Links want the underscored form;
    display text wants spaces.
    """
    prefix = "Draft:" if int(namespace) == get_settings().drafts_namespace else ""
    full = prefix + title
    if not underscored:
        full = full.replace("_", " ")
    return full


# -----------------------------------------------------------------------------

class WikiUrlResolver:
    """Callable mapping a normalized page title to its URL on one wiki."""

    def __init__(self, lang: str | None = None, project: str | None = None):
        settings = get_settings()
        self.lang    = lang or settings.default_lang
        self.project = project or settings.default_project
        self.domain  = project_domain(self.lang, self.project)

    def __call__(self, title: str) -> str:
        return wiki_url(self.domain, title)

    def __repr__(self) -> str:
        return f"WikiUrlResolver({self.domain!r})"


# -----------------------------------------------------------------------------
