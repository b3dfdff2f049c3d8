"""Data models for Quasar API descriptors.

The framework build ships one JSON file per component, directive and
plugin. These models accept that JSON as-is (camelCase keys, unknown keys
ignored) and expose it to the renderer.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

PARTS = (
    "props",
    "slots",
    "methods",
    "events",
    "value",
    "arg",
    "modifiers",
    "injection",
    "quasar",
    "docs",
)


class _ApiModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class PropDescriptor(_ApiModel):
    """A prop, param, return value, slot or modifier. Every field is optional."""

    type: str | list[str] | None = None
    desc: str | None = None
    required: bool = False
    reactive: bool = False
    sync: bool = False
    values: list[Any] | None = None
    default: Any = None
    link: str | None = None
    definition: dict[str, "PropDescriptor"] | None = None
    params: dict[str, "PropDescriptor"] | None = None
    returns: "PropDescriptor | None" = None
    scope: dict[str, "PropDescriptor"] | None = None
    examples: list[str] | None = None


PropDescriptor.model_rebuild()


class EventDescriptor(_ApiModel):
    desc: str | None = None
    params: dict[str, PropDescriptor] | None = None


class MethodDescriptor(_ApiModel):
    desc: str | None = None
    params: dict[str, PropDescriptor] | None = None
    returns: PropDescriptor | None = None


class QuasarConfOptions(_ApiModel):
    """The `framework > config` key a component or plugin reads from."""

    prop_name: str | None = Field(default=None, alias="propName")
    definition: dict[str, PropDescriptor] | None = None


class ApiMeta(_ApiModel):
    docs_url: str | None = Field(default=None, alias="docsUrl")


class ComponentApi(_ApiModel):
    type: Literal["component"]
    meta: ApiMeta | None = None
    quasar_conf_options: QuasarConfOptions | None = Field(default=None, alias="quasarConfOptions")
    props: dict[str, PropDescriptor] | None = None
    slots: dict[str, PropDescriptor] | None = None
    events: dict[str, EventDescriptor] | None = None
    methods: dict[str, MethodDescriptor] | None = None


class DirectiveApi(_ApiModel):
    type: Literal["directive"]
    meta: ApiMeta | None = None
    quasar_conf_options: QuasarConfOptions | None = Field(default=None, alias="quasarConfOptions")
    value: PropDescriptor | None = None
    arg: PropDescriptor | None = None
    modifiers: dict[str, PropDescriptor] | None = None


class PluginApi(_ApiModel):
    type: Literal["plugin"]
    meta: ApiMeta | None = None
    injection: str | None = None
    quasar_conf_options: QuasarConfOptions | None = Field(default=None, alias="quasarConfOptions")
    props: dict[str, PropDescriptor] | None = None
    methods: dict[str, MethodDescriptor] | None = None


ApiDescriptor = Annotated[
    Union[ComponentApi, DirectiveApi, PluginApi],
    Field(discriminator="type"),
]

API_ADAPTER = TypeAdapter(ApiDescriptor)


class ApiPartsSelection(BaseModel):
    """Which sections of a descriptor to show."""

    props: bool = False
    slots: bool = False
    methods: bool = False
    events: bool = False
    value: bool = False
    arg: bool = False
    modifiers: bool = False
    injection: bool = False
    quasar: bool = False
    docs: bool = False

    @classmethod
    def from_flags(cls, **flags: bool) -> "ApiPartsSelection":
        """Build a selection from CLI flags.

        With no part flag set, everything except `docs` is selected.
        Otherwise the selection is exactly the flags that are set.
        """
        if any(flags.get(part) for part in PARTS):
            return cls(**{part: bool(flags.get(part)) for part in PARTS})
        return cls(**{part: part != "docs" for part in PARTS})

    @property
    def selected(self) -> set[str]:
        return {part for part in PARTS if getattr(self, part)}


class RenderOptions(BaseModel):
    """Everything the renderer needs to know about the current invocation."""

    parts: ApiPartsSelection = Field(default_factory=ApiPartsSelection.from_flags)
    filter: str | None = None
