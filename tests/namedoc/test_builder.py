"""Tests for namedoc.builder module."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from namedoc.builder import build_documentation, document_symbol
from namedoc.config import BuilderConfig, config_from_mapping
from namedoc.schema import DocTag, DocumentationModel, ParameterDoc, TypeParameterDoc
from namedoc.symbols import (
    MethodKind,
    ParameterInfo,
    SymbolDescriptor,
    SymbolKind,
    TypeKind,
    TypeParameterInfo,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

    from tests.conftest import DescriptorFactory


def _summary(descriptor: SymbolDescriptor, config: BuilderConfig | None = None) -> str:
    model = build_documentation(descriptor, config)
    assert model is not None
    return model.summary


class TestTypeDocumentation:
    """Summaries for type symbols."""

    @pytest.mark.parametrize(
        ("name", "type_kind", "expected"),
        [
            ("Customer", TypeKind.CLASS, 'Represents the <see cref="Customer"/> class.'),
            ("Point", TypeKind.STRUCT, 'Represents the <see cref="Point"/> struct.'),
            ("IRepository", TypeKind.INTERFACE, 'Defines the <see cref="IRepository"/> interface.'),
            ("ColorMode", TypeKind.ENUM, "Specifies values that represent the color mode."),
            ("IOptions", TypeKind.ENUM, "Specifies values that represent the options."),
            ("Handler", TypeKind.OTHER, "Represents the the handler."),
        ],
    )
    def test_type_templates(
        self, make_type: DescriptorFactory, name: str, type_kind: TypeKind, expected: str
    ) -> None:
        """The type kind selects the summary template."""
        assert _summary(make_type(name, type_kind=type_kind)) == expected

    def test_type_model_has_summary_only(self, make_type: DescriptorFactory) -> None:
        """Types document a summary and nothing else."""
        model = build_documentation(make_type("Customer", type_kind=TypeKind.CLASS))
        assert model is not None
        assert model.returns == ""
        assert model.parameters == ()
        assert model.type_parameters == ()

    def test_custom_cross_reference_format(self, make_type: DescriptorFactory) -> None:
        """The cross-reference format comes from the configuration."""
        config = BuilderConfig(cross_reference_format="``{name}``")
        descriptor = make_type("Customer", type_kind=TypeKind.CLASS)
        assert _summary(descriptor, config) == "Represents the ``Customer`` class."


class TestMethodDocumentation:
    """Summaries, parameters and returns for methods."""

    def test_instance_constructor(self, make_method: DescriptorFactory) -> None:
        """Instance constructors reference their containing type."""
        descriptor = make_method(
            "Engine", method_kind=MethodKind.CONSTRUCTOR, containing_type_name="Engine"
        )
        assert _summary(descriptor) == 'Initializes a new instance of the <see cref="Engine"/> class.'

    def test_static_constructor(self, make_method: DescriptorFactory) -> None:
        """Static constructors initialize static members."""
        descriptor = make_method(
            ".cctor",
            method_kind=MethodKind.CONSTRUCTOR,
            containing_type_name="Engine",
            is_static=True,
        )
        assert _summary(descriptor) == 'Initializes static members of the <see cref="Engine"/> class.'

    def test_ordinary_method_uses_method_summary(self, make_method: DescriptorFactory) -> None:
        """Ordinary methods are phrased from their name."""
        assert _summary(make_method("GetUserName")) == "Gets the user name."

    def test_empty_name_falls_back(self, make_method: DescriptorFactory) -> None:
        """A method without name tokens still gets a summary."""
        assert _summary(make_method("")) == "Performs the operation."

    def test_full_async_method(self, make_method: DescriptorFactory) -> None:
        """Type parameters, parameters and the async return are all documented."""
        descriptor = make_method(
            "GetUserAsync",
            parameters=[ParameterInfo("userId"), ParameterInfo("includeDeleted", is_boolean=True)],
            type_parameters=[TypeParameterInfo("TResult")],
            returns_void=False,
            return_type_name="Task",
            return_is_async_task=True,
            return_async_result_type_name="User",
        )
        model = build_documentation(descriptor)
        assert model == DocumentationModel(
            summary="Gets the user asynchronously.",
            returns=(
                "A task that represents the asynchronous operation. "
                "The task result contains the user."
            ),
            parameters=(
                ParameterDoc("userId", "The the user id."),
                ParameterDoc(
                    "includeDeleted", "A value indicating whether the include deleted is set."
                ),
            ),
            type_parameters=(TypeParameterDoc("TResult", "The tresult type parameter."),),
        )

    def test_boolean_parameter_with_prefix(self, make_method: DescriptorFactory) -> None:
        """Boolean parameters use the bool core phrase."""
        descriptor = make_method("Save", parameters=[ParameterInfo("isDraft", is_boolean=True)])
        model = build_documentation(descriptor)
        assert model is not None
        assert model.parameters == (
            ParameterDoc("isDraft", "A value indicating whether the value is draft."),
        )

    @pytest.mark.parametrize(
        ("fields", "expected"),
        [
            (
                {"return_is_async_task": True, "return_type_name": "Task"},
                "A task that represents the asynchronous operation.",
            ),
            ({"returns_boolean": True}, "True if the operation succeeds; otherwise, false."),
            ({"return_type_name": "String"}, "The the string result."),
            ({"return_type_name": "ICustomerRepository"}, "The the customer repository result."),
            ({"return_type_name": "XMLNode"}, "The the xml node result."),
            ({"return_type_name": ""}, "The result."),
        ],
    )
    def test_return_descriptions(
        self, make_method: DescriptorFactory, fields: dict[str, object], expected: str
    ) -> None:
        """Non-void returns select the async, boolean or type-noun sentence."""
        model = build_documentation(make_method("Compute", returns_void=False, **fields))
        assert model is not None
        assert model.returns == expected

    def test_void_method_has_no_returns(self, make_method: DescriptorFactory) -> None:
        """Void methods leave the returns section empty."""
        model = build_documentation(make_method("Reset", return_type_name="Void"))
        assert model is not None
        assert model.returns == ""

    def test_bool_method_summaries_switch(self, make_method: DescriptorFactory) -> None:
        """Boolean-returning methods read as conditions when enabled."""
        descriptor = make_method("ContainsKey", returns_void=False, returns_boolean=True)
        assert _summary(descriptor) == "Performs the contains key operation."
        config = BuilderConfig(bool_method_summaries=True)
        assert _summary(descriptor, config) == "Determines whether contains key."

    def test_lifecycle_summaries_switch(self, make_method: DescriptorFactory) -> None:
        """Initialize/Terminate read like constructors when enabled."""
        descriptor = make_method("Initialize", containing_type_name="Engine")
        assert _summary(descriptor) == "Initializes the value."
        config = BuilderConfig(lifecycle_method_summaries=True)
        assert (
            _summary(descriptor, config)
            == 'Initializes a new instance of the <see cref="Engine"/> class.'
        )

    def test_configured_verbs(self, make_method: DescriptorFactory) -> None:
        """Extra verbs from the configuration reach the phrase rules."""
        config = config_from_mapping({"extra_verbs": ["Upsert"]})
        assert _summary(make_method("UpsertRecord"), config) == "Upserts the record."

    def test_directly_built_config_verbs(self, make_method: DescriptorFactory) -> None:
        """A BuilderConfig built in code applies its extra verbs too."""
        config = BuilderConfig(extra_verbs=("Upsert",))
        assert _summary(make_method("UpsertRecord"), config) == "Upserts the record."
        assert _summary(make_method("UpsertRecord")) == "Performs the upsert record operation."


class TestPropertyDocumentation:
    """Accessor-driven property summaries."""

    @pytest.mark.parametrize(
        ("getter", "setter", "expected"),
        [
            (True, True, "Gets or sets a value indicating whether the value is visible."),
            (True, False, "Gets a value indicating whether the value is visible."),
            (False, True, "Sets a value indicating whether the value is visible."),
            (False, False, "Represents the the is visible."),
        ],
    )
    def test_boolean_property(
        self, make_property: DescriptorFactory, getter: bool, setter: bool, expected: str
    ) -> None:
        """Boolean properties use the bool core phrase when they have accessors."""
        descriptor = make_property(
            "IsVisible", is_boolean=True, has_getter=getter, has_setter=setter
        )
        assert _summary(descriptor) == expected

    @pytest.mark.parametrize(
        ("getter", "setter", "expected"),
        [
            (True, True, "Gets or sets the the name."),
            (True, False, "Gets the the name."),
            (False, True, "Sets the the name."),
            (False, False, "Represents the the name."),
        ],
    )
    def test_value_property(
        self, make_property: DescriptorFactory, getter: bool, setter: bool, expected: str
    ) -> None:
        """Other properties use the noun phrase of their name."""
        descriptor = make_property("Name", has_getter=getter, has_setter=setter)
        assert _summary(descriptor) == expected


class TestFieldAndEventDocumentation:
    """Field and event summaries."""

    def test_boolean_field(self, make_field: DescriptorFactory) -> None:
        """Boolean fields describe a condition."""
        descriptor = make_field("isReady", is_boolean=True)
        assert _summary(descriptor) == "A value indicating whether the value is ready."

    def test_value_field(self, make_field: DescriptorFactory) -> None:
        """Other fields use the noun phrase of their name."""
        assert _summary(make_field("maxCount")) == "The the max count."

    def test_event(self, make_event: DescriptorFactory) -> None:
        """Events describe when they occur."""
        assert _summary(make_event("Clicked")) == "Occurs when the the clicked."


class TestUnsupportedKinds:
    """Kinds the builder cannot document."""

    @pytest.mark.parametrize(
        "kind",
        [
            SymbolKind.NAMESPACE,
            SymbolKind.PARAMETER,
            SymbolKind.TYPE_PARAMETER,
            SymbolKind.LOCAL,
            SymbolKind.UNKNOWN,
        ],
    )
    def test_unsupported_kind_returns_none(self, kind: SymbolKind) -> None:
        """Unsupported kinds produce no model at all."""
        descriptor = SymbolDescriptor(kind, "value")
        assert not descriptor.is_supported
        assert build_documentation(descriptor) is None

    def test_unsupported_kind_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """The rejection is logged with structured fields."""
        caplog.set_level(logging.DEBUG, logger="namedoc.builder")
        build_documentation(SymbolDescriptor(SymbolKind.NAMESPACE, "Contoso"))
        records = [record for record in caplog.records if record.name == "namedoc.builder"]
        assert records
        record = records[-1]
        assert getattr(record, "operation", None) == "build_documentation"
        assert getattr(record, "status", None) == "unsupported"
        assert getattr(record, "symbol_kind", None) == "namespace"
        assert getattr(record, "symbol_name", None) == "Contoso"


class TestDocumentSymbol:
    """Ancestor walk over a caller-supplied chain."""

    def test_first_supported_symbol_is_documented(self) -> None:
        """Unsupported symbols are skipped until a supported ancestor is found."""
        parameter = SymbolDescriptor(SymbolKind.PARAMETER, "count")
        method = SymbolDescriptor(SymbolKind.METHOD, "Execute")
        owner = SymbolDescriptor(SymbolKind.TYPE, "Runner", type_kind=TypeKind.CLASS)

        result = document_symbol([parameter, method, owner])

        assert result is not None
        assert result.descriptor is method
        assert result.model.summary == "Executes the value."
        assert [entry.tag for entry in result.entries] == [DocTag.SUMMARY]
        assert result.entries[0].text == "Executes the value."

    def test_no_supported_symbol(self) -> None:
        """A chain without supported symbols yields None."""
        chain = [
            SymbolDescriptor(SymbolKind.LOCAL, "index"),
            SymbolDescriptor(SymbolKind.NAMESPACE, "Contoso"),
        ]
        assert document_symbol(chain) is None

    def test_empty_chain(self) -> None:
        """An empty chain yields None."""
        assert document_symbol([]) is None

    def test_chain_may_be_an_iterator(self) -> None:
        """The walk stops at the first supported symbol of a lazy chain."""
        consumed: list[SymbolKind] = []

        def chain() -> Iterator[SymbolDescriptor]:
            for kind in (SymbolKind.LOCAL, SymbolKind.FIELD, SymbolKind.TYPE):
                consumed.append(kind)
                yield SymbolDescriptor(kind, "retryCount")

        result = document_symbol(chain())
        assert result is not None
        assert result.descriptor.kind is SymbolKind.FIELD
        assert consumed == [SymbolKind.LOCAL, SymbolKind.FIELD]
