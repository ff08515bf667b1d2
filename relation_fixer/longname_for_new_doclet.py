"""Utility for naming doclets copied onto a descendant entity."""

from relation_fixer.validation import ValidationError, member_separator_index


def longname_for_new_doclet(
    parent_longname: str, child_longname: str, *, strict: bool = False
) -> str:
    """Move a member longname onto `child_longname`.

    The separator (`.` static, `#` instance) is kept from the parent member,
    e.g. ``Animal#speak`` onto ``Dog`` gives ``Dog#speak``.
    """
    index = member_separator_index(parent_longname)
    if index == -1:
        if strict:
            msg = f"Member longname without separator: {parent_longname}"
            raise ValidationError([msg])
        return child_longname
    return child_longname + parent_longname[index:]
