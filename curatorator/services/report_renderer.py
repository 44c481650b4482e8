"""HTML report rendering for the Curatorator pipeline.

Turns a target artist and its ranked similar artists into one
self-contained HTML5 page:

- **Banner** - the target's linked name and thumbnail.
- **Show Themes** - genes shared by at least ``min_theme_count`` artists
  (candidates plus the target), most frequent first, as "name (count)".
- **Featured Artists** - one card per candidate with similarity of at least
  ``min_similarity``: linked name, score, bio line, image and gene list.

Styling comes from the Bootstrap 3 CDN; the only inlined asset is the 1x1
placeholder PNG used for artists without a thumbnail.  Every interpolated
value is HTML-escaped.
"""

from __future__ import annotations

import html
from collections import Counter
from collections.abc import Iterable

from curatorator.models.artist import Artist, GeneCount, ScoredArtist
from curatorator.services.gene_similarity import filter_by_minimum_similarity
from curatorator.utils.logging import get_logger

PLACEHOLDER_IMAGE = (
    "data:image/png;base64,iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAIAAACQd1PeAAAACXBIWXMAAAsTAAALEw"
    "EAmpwYAAAAB3RJTUUH3wweFzUXYgE7cwAAABl0RVh0Q29tbWVudABDcmVhdGVkIHdpdGggR0lNUFeBDhcAAAAMSURB"
    "VAjXY3j27BkABWgCs9Pm25QAAAAASUVORK5CYII="
)
_PLACEHOLDER_WIDTH = 300
_PLACEHOLDER_HEIGHT = 225

_DEFAULT_MIN_SIMILARITY = 0.1
_DEFAULT_MIN_THEME_COUNT = 10

_HEAD = (
    '<!DOCTYPE html><html lang="en"><head><meta charset="utf-8">'
    '<meta http-equiv="X-UA-Compatible" content="IE=edge">'
    '<meta name="viewport" content="width=device-width, initial-scale=1">'
    "<title>{title}</title>"
    '<link rel="stylesheet" href="https://maxcdn.bootstrapcdn.com/bootstrap/3.3.6/css/bootstrap.min.css" '
    'integrity="sha384-1q8mTJOASx8j1Au+a5WDVnPi2lkFfwwEAa8hDDdjZlpLegxhjVME1fgjWPGmkzs7" '
    'crossorigin="anonymous">'
    '<!--[if lt IE 9]><script src="https://oss.maxcdn.com/html5shiv/3.7.2/html5shiv.min.js"></script>'
    '<script src="https://oss.maxcdn.com/respond/1.4.2/respond.min.js"></script><![endif]-->'
    '</head><body><div class="container" role="main"><br>'
)

_FOOTER = (
    '<hr><p><small>All data via <a href="https://artsy.net/">artsy.net</a>'
    '<a href="https://developers.artsy.net/">\'s API</a>.</small></p></div>'
    '<script src="https://ajax.googleapis.com/ajax/libs/jquery/1.11.3/jquery.min.js"></script>'
    '<script src="https://maxcdn.bootstrapcdn.com/bootstrap/3.3.6/js/bootstrap.min.js"></script>'
    "</body></html>"
)


def _esc(value: str) -> str:
    return html.escape(value, quote=True)


# ---------------------------------------------------------------------------
# Gene statistics
# ---------------------------------------------------------------------------


def gene_frequency(artists: Iterable[Artist]) -> dict[str, int]:
    """Count how often each gene name occurs across *artists*.

    Keys are ordered by first appearance.  The counts sum to the total
    number of gene occurrences in the input.
    """
    counts: Counter[str] = Counter()
    for artist in artists:
        counts.update(artist.gene_names)
    return dict(counts)


def top_genes(artists: Iterable[Artist], minimum_count: int) -> list[GeneCount]:
    """Genes occurring at least *minimum_count* times, most frequent first.

    Equal counts come out in reverse order of first appearance (ascending
    stable sort, then reversed), the same rule used for ranking artists.
    """
    rows = [
        GeneCount(gene=gene, count=count)
        for gene, count in gene_frequency(artists).items()
        if count >= minimum_count
    ]
    rows.sort(key=lambda row: row.count)
    rows.reverse()
    return rows


# ---------------------------------------------------------------------------
# Renderer
# ---------------------------------------------------------------------------


class ReportRenderer:
    """Renders the similar-artists report as an HTML document."""

    def __init__(
        self,
        title: str = "Curatorator",
        min_similarity: float = _DEFAULT_MIN_SIMILARITY,
        min_theme_count: int = _DEFAULT_MIN_THEME_COUNT,
    ) -> None:
        self._title = title
        self._min_similarity = min_similarity
        self._min_theme_count = min_theme_count
        self._logger = get_logger(__name__)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def render_document(self, target: Artist, ranked: list[ScoredArtist]) -> str:
        """Render the full report for *target* and its ranked candidates.

        Parameters
        ----------
        target:
            The enriched artist the report is about.
        ranked:
            Candidates in descending similarity order.

        Returns
        -------
        str
            A complete HTML5 document.
        """
        featured = filter_by_minimum_similarity(ranked, self._min_similarity)
        theme_artists = [s.artist for s in ranked] + [target]

        parts = [
            _HEAD.format(title=_esc(self._title)),
            self.render_banner(target),
            '<div class="page-header"><h1>Show Themes</h1></div>\n',
            self.render_themes(theme_artists),
            '<div class="page-header"><h1>Featured Artists</h1></div>\n',
            *(self.render_artist_card(scored) for scored in featured),
            _FOOTER,
            "\n",
        ]

        self._logger.info(
            "report_rendered",
            artist_id=target.id,
            candidates=len(ranked),
            featured=len(featured),
        )
        return "".join(parts)

    def render_banner(self, target: Artist) -> str:
        """Jumbotron with the target's linked name and image."""
        return (
            '<div class="jumbotron">'
            f'<h1><a href="{_esc(target.permalink)}">{_esc(target.name)}</a></h1>'
            f"{self._image_tag(target)}></div>\n"
        )

    def render_themes(self, artists: Iterable[Artist]) -> str:
        """Paragraph listing the dominant genes as "name (count)"."""
        rows = top_genes(artists, self._min_theme_count)
        listing = ", ".join(f"{_esc(row.gene)} ({row.count})" for row in rows)
        return f"<p>{listing}.</p>\n"

    def render_artist_card(self, scored: ScoredArtist) -> str:
        """One featured-artist block."""
        artist = scored.artist
        genes = ", ".join(_esc(name) for name in artist.gene_names)
        return (
            f'<h3><a href="{_esc(artist.permalink)}">{_esc(artist.name)}</a> '
            f"<small>({scored.similarity:.2f})</small></h3>"
            f'{self._image_tag(artist)} style="margin-bottom: 16px;">'
            f"{self.bio_line(artist)}"
            f"\n<p>{genes}.</p>\n"
        )

    @staticmethod
    def bio_line(artist: Artist) -> str:
        """``(nationality, birthday)`` line, or ``""`` when neither is known.

        Location is appended only when the line is shown at all.
        """
        details = [value for value in (artist.nationality, artist.birthday) if value]
        if not details:
            return ""
        if artist.location:
            details.append(artist.location)
        return f"<p><strong>({_esc(', '.join(details))})</strong></p>\n"

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _image_tag(artist: Artist) -> str:
        """Open ``<img`` tag for the artist; the caller closes it."""
        if artist.thumbnail:
            return f'<img src="{_esc(artist.thumbnail)}" alt="{_esc(artist.name)}"'
        return (
            f'<img src="{PLACEHOLDER_IMAGE}" alt="{_esc(artist.name)}" '
            f'width="{_PLACEHOLDER_WIDTH}" height="{_PLACEHOLDER_HEIGHT}"'
        )
