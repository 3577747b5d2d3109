"""Plugin configuration.

Accepts the camelCase keys used in codegen configuration files as well as
snake_case attribute names:

    config = PluginConfig.from_mapping({"disableChecks": True, "typesPrefix": "I"})
"""

from typing import Any, Literal, Mapping

from graphql import FragmentDefinitionNode
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigurationError
from .ir import FragmentDescriptor, MutationPolicy


class PluginConfig(BaseModel):
    """Options recognised by the generator."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    disable_checks: bool = Field(False, alias="disableChecks")
    external_fragments: list[Any] = Field(default_factory=list, alias="externalFragments")

    # Naming
    types_prefix: str = Field("", alias="typesPrefix")
    types_suffix: str = Field("", alias="typesSuffix")
    naming_convention: Literal["pascal-case", "keep"] = Field(
        "pascal-case", alias="namingConvention"
    )
    transform_underscore: bool = Field(False, alias="transformUnderscore")
    document_variable_suffix: str = Field("Document", alias="documentVariableSuffix")
    fragment_variable_suffix: str = Field("FragmentDoc", alias="fragmentVariableSuffix")

    # Imports
    gql_import: str = Field("graphql-tag", alias="gqlImport")
    apollo_client_import_from: str = Field("@apollo/client", alias="apolloClientImportFrom")
    import_operation_types_from: str | None = Field(None, alias="importOperationTypesFrom")
    namespaced_import_name: str = Field("Types", alias="namespacedImportName")

    # Output shape
    mutation_policy: MutationPolicy = Field(MutationPolicy.RECORD_ONLY, alias="mutationPolicy")
    factory_name: str = Field("graphQlClient", alias="factoryName")

    @field_validator("external_fragments", mode="before")
    @classmethod
    def _coerce_fragments(cls, value):
        """Accept FragmentDescriptor instances or mappings shaped like them."""
        if value is None:
            return []
        fragments = []
        for item in value:
            if isinstance(item, FragmentDescriptor):
                fragments.append(item)
                continue
            if not isinstance(item, Mapping):
                raise ValueError(f"Unsupported external fragment: {item!r}")
            node = item.get("node")
            if not isinstance(node, FragmentDefinitionNode):
                raise ValueError("External fragment 'node' must be a FragmentDefinitionNode")
            fragments.append(
                FragmentDescriptor(
                    node=node,
                    name=item.get("name") or node.name.value,
                    on_type=item.get("onType") or item.get("on_type") or node.type_condition.name.value,
                    is_external=item.get("isExternal", item.get("is_external", True)),
                )
            )
        return fragments

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any] | None = None) -> "PluginConfig":
        """Build a config, reporting invalid values as ConfigurationError."""
        try:
            return cls.model_validate(dict(values or {}))
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e
