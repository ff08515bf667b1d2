"""Checks for the doclet preconditions the resolver relies on."""

from collections import Counter
from collections.abc import Iterable

from relation_fixer.doclet import Doclet


class ValidationError(ValueError):
    """Raised when doclets break a precondition of relation fixing."""

    def __init__(self, problems: list[str]) -> None:
        """Initialize with the list of problems found."""
        self.problems = problems
        super().__init__("; ".join(problems))


def member_separator_index(longname: str) -> int:
    """Index of the last `.` or `#` in a longname, or -1 if there is none."""
    return max(longname.rfind("."), longname.rfind("#"))


MEMBER_SCOPES = frozenset({"static", "instance"})


def validate_doclets(doclets: Iterable[Doclet]) -> None:
    """Raise `ValidationError` on malformed member longnames or duplicates.

    Only static and instance members need a `.` or `#` separator; inner
    symbols such as `module:zoo~Animal` are not copied between entities.
    """
    problems: list[str] = []
    counts: Counter[str] = Counter()
    for doclet in doclets:
        counts[doclet.longname] += 1
        if (
            doclet.memberof
            and doclet.scope in MEMBER_SCOPES
            and member_separator_index(doclet.longname) == -1
        ):
            problems.append(f"Member longname without separator: {doclet.longname}")

    problems.extend(
        f"Duplicate longname ({count}x): {longname}"
        for longname, count in counts.items()
        if count > 1
    )
    if problems:
        raise ValidationError(problems)
