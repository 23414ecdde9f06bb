"""Tests for GitHub Trending HTML extraction."""

import pytest
from pydantic import ValidationError

from trending_scraper.integrations.extractor import extract_repositories
from trending_scraper.models import Repository

TRENDING_HTML = """
<html>
  <body>
    <article class="Box-row">
      <h2 class="h3 lh-condensed">
        <a href="/octocat/hello-world">
          <span class="text-normal">octocat /</span>
          hello-world
        </a>
      </h2>
      <p class="col-9 color-fg-muted my-1 pr-4">
        My   first repository
      </p>
      <div class="f6 color-fg-muted mt-2">
        <span itemprop="programmingLanguage">Python</span>
        <a class="Link--muted" href="/octocat/hello-world/stargazers">
          12,345
        </a>
        <a class="Link--muted" href="/octocat/hello-world/forks">678</a>
      </div>
    </article>
    <article class="Box-row">
      <h2 class="h3 lh-condensed">
        <a href="/torvalds/linux">torvalds / linux</a>
      </h2>
      <p class="col-9 color-fg-muted my-1 pr-4">Linux kernel source tree</p>
      <a href="/torvalds/linux/stargazers">190k</a>
    </article>
  </body>
</html>
"""


def test_extract_repositories_success():
    """Test that every well-formed row becomes a record, in page order."""
    repos = extract_repositories(TRENDING_HTML)

    assert repos == [
        Repository(
            name="octocat/hello-world",
            url="https://github.com/octocat/hello-world",
            description="My   first repository",
            stars="12,345",
        ),
        Repository(
            name="torvalds/linux",
            url="https://github.com/torvalds/linux",
            description="Linux kernel source tree",
            stars="190k",
        ),
    ]


def test_name_removes_all_whitespace():
    """Test that whitespace inside the title is removed too."""
    html = '<article class="Box-row"><h2><a href="/foo/bar"> foo / bar </a></h2></article>'

    repos = extract_repositories(html)

    assert repos[0].name == "foo/bar"


def test_description_and_stars_keep_inner_whitespace():
    """Test that only leading and trailing whitespace is trimmed."""
    html = """
    <article class="Box-row">
      <h2><a href="/a/b">a/b</a></h2>
      <p class="col-9">  two  spaces  </p>
      <a href="/a/b/stargazers">  1 234  </a>
    </article>
    """

    repos = extract_repositories(html)

    assert repos[0].description == "two  spaces"
    assert repos[0].stars == "1 234"


def test_missing_fields_default_to_empty_strings():
    """Test that a row with only a title still yields a record."""
    html = '<article class="Box-row"><h2><a href="/only/title">only/title</a></h2></article>'

    repos = extract_repositories(html)

    assert len(repos) == 1
    assert repos[0].description == ""
    assert repos[0].stars == ""


def test_empty_href_gives_bare_origin():
    """Test that a title link without href still produces a URL."""
    html = '<article class="Box-row"><h2><a>owner/name</a></h2></article>'

    repos = extract_repositories(html)

    assert repos[0].url == "https://github.com"


@pytest.mark.parametrize(
    "bad_row",
    [
        '<article class="Box-row"><h2>No link here</h2></article>',
        '<article class="Box-row"><h2><a href="/ghost/repo">   \n  </a></h2></article>',
        '<article class="Box-row"><p class="col-9">Description only</p></article>',
    ],
)
def test_rows_without_title_are_skipped(bad_row):
    """Test that a row without a usable title contributes nothing."""
    html = (
        f"{bad_row}"
        '<article class="Box-row"><h2><a href="/valid/repo">valid/repo</a></h2></article>'
    )

    repos = extract_repositories(html)

    assert [r.name for r in repos] == ["valid/repo"]


def test_selectors_are_scoped_to_the_row():
    """Test that a row never borrows fields from a neighbouring row."""
    html = """
    <article class="Box-row">
      <h2><a href="/first/repo">first/repo</a></h2>
    </article>
    <article class="Box-row">
      <h2><a href="/second/repo">second/repo</a></h2>
      <p class="col-9">Second description</p>
      <a href="/second/repo/stargazers">42</a>
    </article>
    """

    first, second = extract_repositories(html)

    assert first.description == ""
    assert first.stars == ""
    assert second.description == "Second description"
    assert second.stars == "42"


def test_title_must_be_a_direct_child_of_h2():
    """Test that only the h2 > a link is used as the title."""
    html = """
    <article class="Box-row">
      <a href="/sponsors/someone">Sponsor</a>
      <h2><span><a href="/nested/link">nested/link</a></span></h2>
    </article>
    """

    assert extract_repositories(html) == []


def test_duplicate_rows_are_kept():
    """Test that repeated rows are not deduplicated."""
    row = '<article class="Box-row"><h2><a href="/a/b">a/b</a></h2></article>'

    repos = extract_repositories(row * 3)

    assert len(repos) == 3


def test_other_containers_are_ignored():
    """Test that only article.Box-row blocks count as rows."""
    html = """
    <div class="Box-row"><h2><a href="/div/row">div/row</a></h2></div>
    <article class="Box"><h2><a href="/plain/box">plain/box</a></h2></article>
    """

    assert extract_repositories(html) == []


@pytest.mark.parametrize("markup", ["", "<html><body>No articles found</body></html>"])
def test_no_rows_returns_empty_list(markup):
    """Test handling of pages without repository rows."""
    assert extract_repositories(markup) == []


def test_records_are_immutable():
    """Test that records cannot be changed after creation."""
    repo = extract_repositories(TRENDING_HTML)[0]

    with pytest.raises(ValidationError):
        repo.name = "changed"
