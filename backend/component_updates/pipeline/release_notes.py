"""
Component Update Helper — Release note composer.

Turns a component-update issue or PR into a single release-note line:

  Comes with [OpenSSL v3.1.4](https://www.openssl.org/news/openssl-3.1-notes.html).

The changelog URL comes from the first resolver that finds one:
  1. fixed per-package URL templates (no network)
  2. PRs: an explicit "See <url> for details" sentence
  3. PRs: a referenced git-for-windows/git issue, fetched via the API
  4. issues: a URL in the issue body itself
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from component_updates.errors import PreconditionError, ResolutionError
from component_updates.github.api import github_api_request
from component_updates.github.auth import GitHubContext
from component_updates.models.issue import Issue
from component_updates.models.update import ReleaseNote
from component_updates.pipeline.classify import pretty_package_name, strip_cross_track_prefix
from component_updates.pipeline.extract import guess_component_update_details
from component_updates.utils.logging import logger

COMPONENT_UPDATE_LABEL = "component-update"

SEE_FOR_DETAILS = re.compile(r"See (https://\S+) for details")
SIBLING_ISSUE = re.compile(r"https://github\.com/git-for-windows/git/issues/(\d+)")

TRAILING_URL = re.compile(r"^(https://\S+)$", re.MULTILINE)
BODY_URL_PATTERNS = {
    "bash": re.compile(r"^(https://\S+)", re.MULTILINE),  # first URL on any line
    "gnutls": re.compile(r"(https://[^\s)]+)"),  # anywhere, even inside (...)
}


def _openssl_series(version: str) -> str:
    # 1.1.1 kept its own notes page; 3.x notes are per major.minor
    return re.sub(r"^(1\.1\.1|\d+\.\d+).*$", r"\1", version)


CHANGELOG_TEMPLATES: dict[str, Callable[[str], str]] = {
    "perl": lambda v: f"http://search.cpan.org/dist/perl-{v}/pod/perldelta.pod",
    "curl": lambda v: f"https://curl.se/changes.html#{v.replace('.', '_')}",
    "openssl": lambda v: f"https://www.openssl.org/news/openssl-{_openssl_series(v)}-notes.html",
    "git-lfs": lambda v: f"https://github.com/git-lfs/git-lfs/releases/tag/v{v}",
    "git-credential-manager": (
        lambda v: f"https://github.com/git-ecosystem/git-credential-manager/releases/tag/v{v}"
    ),
}


@dataclass(frozen=True)
class ChangelogQuery:
    """Everything a resolver may look at. `package_name` carries no mingw-w64- prefix."""

    context: GitHubContext | None
    issue: Issue
    package_name: str
    version: str


def match_url_in_body(package_name: str, body: str | None) -> str | None:
    text = (body or "").replace("\r\n", "\n")
    pattern = BODY_URL_PATTERNS.get(package_name.lower(), TRAILING_URL)
    match = pattern.search(text)
    return match.group(1) if match else None


async def _from_template(query: ChangelogQuery) -> str | None:
    template = CHANGELOG_TEMPLATES.get(query.package_name)
    return template(query.version) if template else None


async def _from_details_sentence(query: ChangelogQuery) -> str | None:
    if not query.issue.is_pull_request:
        return None
    match = SEE_FOR_DETAILS.search(query.issue.body)
    return match.group(1) if match else None


async def _from_sibling_issue(query: ChangelogQuery) -> str | None:
    if not query.issue.is_pull_request:
        return None
    match = SIBLING_ISSUE.search(query.issue.body)
    if not match:
        return None
    logger.info("  Following reference to git-for-windows/git#%s", match.group(1))
    sibling = await github_api_request(
        query.context,
        None,
        "GET",
        f"/repos/git-for-windows/git/issues/{match.group(1)}",
    )
    return match_url_in_body(query.package_name, sibling.get("body"))


async def _from_issue_body(query: ChangelogQuery) -> str | None:
    if query.issue.is_pull_request:
        return None
    return match_url_in_body(query.package_name, query.issue.body)


CHANGELOG_RESOLVERS: tuple[Callable[[ChangelogQuery], Awaitable[str | None]], ...] = (
    _from_template,
    _from_details_sentence,
    _from_sibling_issue,
    _from_issue_body,
)


async def resolve_changelog_url(query: ChangelogQuery) -> str | None:
    for resolver in CHANGELOG_RESOLVERS:
        url = await resolver(query)
        if url:
            logger.debug("  %s resolved changelog URL %s", resolver.__name__, url)
            return url
    return None


async def guess_release_notes(
    context: GitHubContext | None,
    issue: Issue | dict[str, Any],
) -> ReleaseNote:
    """
    Compose the release note for a component-update issue or PR.

    Raises PreconditionError for issues without exactly one
    'component-update' label, ExtractionError when title/body cannot be
    parsed and ResolutionError when no changelog URL can be found.
    """
    if not isinstance(issue, Issue):
        issue = Issue.model_validate(issue)

    if not issue.is_pull_request and issue.count_labels(COMPONENT_UPDATE_LABEL) != 1:
        raise PreconditionError(issue.number)

    details = guess_component_update_details(issue.title, issue.body)
    package_name = strip_cross_track_prefix(details.package_name)

    url = await resolve_changelog_url(
        ChangelogQuery(
            context=context,
            issue=issue,
            package_name=package_name,
            version=details.version,
        )
    )
    if not url:
        raise ResolutionError(issue.number)

    return ReleaseNote(
        message=f"Comes with [{pretty_package_name(package_name)} v{details.version}]({url}).",
        package=package_name,
        version=details.version,
    )
