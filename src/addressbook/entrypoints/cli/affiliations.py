"""ADDRESSBOOK affiliation commands.

Thin wrappers that turn command arguments into `Affiliation` values and
`UniqueAffiliationList`s, the same way the contact-record layer does.

Behavior
- Validated affiliation names go to **stdout**, one per line, so output can be piped.
- Human-oriented notices go to **stderr**.

Failure modes
- A malformed affiliation → ``click.BadParameter`` (exit code 2) quoting the
  rejected value and the constraint message.
- A duplicate inside one argument list, or a clash under ``merge --strict`` →
  ``click.ClickException`` (exit code 1).

Examples
    $ addressbook affiliations check Acme NUS
    $ addressbook affiliations merge --into Acme,NUS --from NUS,MIT
"""

from __future__ import annotations

import logging

import click
import click_extra as clickx

from addressbook.adapters.affiliation_mapper import AffiliationMapper
from addressbook.domain.affiliation import Affiliation
from addressbook.domain.errors import DuplicateAffiliationError, IllegalValueError
from addressbook.domain.unique_affiliation_list import UniqueAffiliationList

from .helpers import error, success, warn

logger = logging.getLogger(__name__)


def _parse_affiliation(raw: str, param_hint: str) -> Affiliation:
    try:
        return Affiliation(raw)
    except IllegalValueError as e:
        raise click.BadParameter(f"{raw!r}: {e.message}", param_hint=param_hint) from e


def _parse_list(csv: str, param_hint: str) -> UniqueAffiliationList:
    """Build a strict list from a comma-separated option value.

    An empty value means an empty list; a blank item inside a non-empty value
    is an invalid affiliation.
    """
    names = csv.split(",") if csv.strip() else []
    try:
        return AffiliationMapper.to_domain(names)
    except IllegalValueError as e:
        raise click.BadParameter(
            f"{e.value!r}: {e.message}", param_hint=param_hint
        ) from e
    except DuplicateAffiliationError as e:
        raise click.ClickException(f"{param_hint}: {e}") from e


def _echo_list(affiliations: UniqueAffiliationList) -> None:
    for name in AffiliationMapper.to_record(affiliations):
        click.echo(name)


@click.group(cls=clickx.ExtraGroup)
def affiliations() -> None:
    """Affiliation validation and merging commands."""


@affiliations.command()
@click.argument("names", nargs=-1, required=True)
def check(names: tuple[str, ...]) -> None:
    """Validate each NAME and print it in its canonical bracketed form."""
    parsed = [_parse_affiliation(raw, "NAMES") for raw in names]
    for affiliation in parsed:
        click.echo(str(affiliation))
    success(f"{len(parsed)} affiliation(s) valid.")


@affiliations.command()
@click.option(
    "--into",
    "into_csv",
    required=True,
    help="Comma-separated affiliations already on the contact.",
)
@click.option(
    "--from",
    "from_csv",
    required=True,
    help="Comma-separated affiliations to bring in.",
)
@click.option(
    "--strict/--lenient",
    default=False,
    show_default=True,
    help=(
        "With --strict, refuse the whole merge if any affiliation is already "
        "present. With --lenient, skip affiliations already present."
    ),
)
def merge(into_csv: str, from_csv: str, strict: bool) -> None:
    """Merge the --from affiliations into the --into affiliations and print the result."""
    target = _parse_list(into_csv, "--into")
    incoming = _parse_list(from_csv, "--from")

    if strict:
        try:
            target.add_all(incoming)
        except DuplicateAffiliationError as e:
            clashes = sorted(a.name for a in target.to_set() & incoming.to_set())
            logger.debug("Strict merge refused; already present: %s", clashes)
            error(f"Already present: {', '.join(clashes)}")
            raise click.ClickException(str(e)) from e
    else:
        before = len(target)
        target.merge_from(incoming)
        skipped = len(incoming) - (len(target) - before)
        if skipped:
            logger.info("Skipped %d affiliation(s) already present", skipped)
            warn(f"Skipped {skipped} affiliation(s) already present.")

    _echo_list(target)
