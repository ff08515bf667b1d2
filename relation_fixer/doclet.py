"""Data model for JSDoc doclets."""

from dataclasses import dataclass, field, fields
from typing import Any

# JSDoc record key -> Doclet attribute, for keys whose spelling differs.
FIELD_ALIASES = {
    "augmentsNested": "augments_nested",
    "mixesNested": "mixes_nested",
    "implementsNested": "implements_nested",
}

FLAG_FIELDS = ("ignore", "undocumented", "inherited", "mixed")
MARKER_FIELDS = ("inheritdoc", "overrides")
LIST_FIELDS = ("augments_nested", "mixes_nested", "implements_nested", "descendants")


@dataclass
class Doclet:
    """Represents a documented symbol (class, member, mixin, etc.)."""

    longname: str
    name: str = ""
    kind: str = ""  # class/interface/mixin/function/member/etc.
    memberof: str | None = None
    scope: str | None = None
    ignore: bool = False
    undocumented: bool = False
    inheritdoc: str | None = None  # None: absent, "": bare marker
    overrides: str | None = None
    inherited: bool = False
    mixed: bool = False
    augments_nested: list[str] = field(default_factory=list)
    mixes_nested: list[str] = field(default_factory=list)
    implements_nested: list[str] = field(default_factory=list)
    descendants: list[str] = field(default_factory=list)
    raw: dict[str, Any] = field(default_factory=dict)  # original parsed record

    @classmethod
    def from_dict(cls, record: dict[str, Any]) -> "Doclet":
        """Build a doclet from a JSDoc record, keeping the record as `raw`."""
        memberof = record.get("memberof")
        scope = record.get("scope")
        return cls(
            longname=str(record["longname"]),
            name=str(record.get("name") or ""),
            kind=str(record.get("kind") or ""),
            memberof=str(memberof) if memberof else None,
            scope=str(scope) if scope else None,
            ignore=bool(record.get("ignore")),
            undocumented=bool(record.get("undocumented")),
            inheritdoc=_marker(record.get("inheritdoc")),
            overrides=_marker(record.get("overrides")),
            inherited=bool(record.get("inherited")),
            mixed=bool(record.get("mixed")),
            augments_nested=_longnames(record.get("augmentsNested")),
            mixes_nested=_longnames(record.get("mixesNested")),
            implements_nested=_longnames(record.get("implementsNested")),
            descendants=_longnames(record.get("descendants")),
            raw=record,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize back to a JSDoc record, preserving unmodelled keys."""
        out = dict(self.raw)
        out["longname"] = self.longname
        for key, value in (
            ("name", self.name),
            ("kind", self.kind),
            ("memberof", self.memberof),
            ("scope", self.scope),
        ):
            if value:
                out[key] = value
            else:
                out.pop(key, None)

        for attr in FLAG_FIELDS:
            if getattr(self, attr):
                out[attr] = True
            else:
                out.pop(attr, None)

        for attr in MARKER_FIELDS:
            value = getattr(self, attr)
            if value is None:
                out.pop(attr, None)
            else:
                out[attr] = value

        for key, attr in (*FIELD_ALIASES.items(), ("descendants", "descendants")):
            values = getattr(self, attr)
            if values or key in self.raw:
                out[key] = list(values)
        return out

    def get(self, key: str, default: Any = None) -> Any:
        """Read a field by its JSDoc or attribute name, falling back to `raw`."""
        attr = FIELD_ALIASES.get(key, key)
        if attr in _ATTRIBUTE_NAMES:
            return getattr(self, attr)
        return self.raw.get(key, default)

    def set_relation_tag(self, tag: str) -> None:
        """Mark the doclet `inherited` or `mixed`; the two are exclusive."""
        self.inherited = tag == "inherited"
        self.mixed = tag == "mixed"


_ATTRIBUTE_NAMES = frozenset(f.name for f in fields(Doclet)) - {"raw"}


def _marker(value: object) -> str | None:
    if value is None or value is False:
        return None
    if value is True:
        return ""
    return str(value)


def _longnames(value: object) -> list[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    return [str(x) for x in value]  # type: ignore[attr-defined]
