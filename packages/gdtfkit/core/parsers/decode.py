"""Declarative decode contract shared by every GDTF entity.

Each entity is a frozen pydantic model that declares how its XML maps onto
its fields:

- ``TAG``: the element name this entity is decoded from
- ``XML_ATTRIBUTES``: attribute name -> field, value parser, policy
- ``XML_CHILDREN``: child tag -> field, entity type, cardinality

The table is checked against the model's fields when the class is created,
so a field can neither be left out of decoding nor silently lose its
required-field validation.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
import functools
from typing import Any, ClassVar, Self
import xml.etree.ElementTree as ET

from pydantic import BaseModel, ConfigDict

from gdtfkit.core.errors import (
    InvalidValueError,
    MalformedXmlError,
    MissingRequiredFieldError,
)
from gdtfkit.core.parsers.xml import XmlCursor
from gdtfkit.core.units.node import UnsetNode
from gdtfkit.core.utils.logging import get_logger

logger = get_logger(__name__)


class ChildKind(str, Enum):
    """Cardinality of a child element.

    Attributes:
        ONE: At most one child, stored as a single entity
        EACH: Repeated child directly under this element, stored as a tuple
        GROUP: One plural wrapper element whose children are decoded with
            ``decode_many``, stored as a tuple
    """

    ONE = "one"
    EACH = "each"
    GROUP = "group"


@dataclass(frozen=True)
class XmlAttr:
    """Mapping of one XML attribute to a model field.

    Attributes:
        xml_name: Attribute name in the document
        field: Model field populated from it
        parse: Value codec; raises InvalidValueError on malformed text
        required: Absent or empty values raise MissingRequiredFieldError
        tolerant: Malformed values fall back to the field default
    """

    xml_name: str
    field: str
    parse: Callable[[str], Any]
    required: bool = False
    tolerant: bool = False


@dataclass(frozen=True)
class XmlChild:
    """Mapping of one child element to a model field."""

    tag: str
    field: str
    model: type[GdtfNode]
    kind: ChildKind = ChildKind.ONE
    required: bool = False


def _is_missing(value: Any) -> bool:
    return value is None or value == "" or isinstance(value, UnsetNode)


@functools.cache
def _attribute_index(cls: type[GdtfNode]) -> dict[str, XmlAttr]:
    return {spec.xml_name: spec for spec in cls.XML_ATTRIBUTES}


@functools.cache
def _child_index(cls: type[GdtfNode]) -> dict[str, XmlChild]:
    return {spec.tag: spec for spec in cls.XML_CHILDREN}


class GdtfNode(BaseModel):
    """Base class for decoded GDTF entities.

    Subclasses declare ``TAG``, ``XML_ATTRIBUTES`` and ``XML_CHILDREN`` and
    get ``decode`` (one entity from its start tag) and ``decode_many`` (all
    matching children of a wrapper tag) for free.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    TAG: ClassVar[str]
    XML_ATTRIBUTES: ClassVar[tuple[XmlAttr, ...]] = ()
    XML_CHILDREN: ClassVar[tuple[XmlChild, ...]] = ()

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        if "TAG" in cls.__dict__:
            cls._check_decode_table()

    @classmethod
    def _check_decode_table(cls) -> None:
        """Validate the decode table against the model fields.

        Raises:
            TypeError: If a field is unmapped or mapped twice, an entry names
                an unknown field, or a required flag disagrees with pydantic
        """
        entries: list[XmlAttr | XmlChild] = [*cls.XML_ATTRIBUTES, *cls.XML_CHILDREN]
        mapped = [entry.field for entry in entries]
        fields = cls.model_fields

        unknown = sorted(set(mapped) - set(fields))
        if unknown:
            raise TypeError(f"{cls.__name__} decode table names unknown fields: {unknown}")
        duplicated = sorted({name for name in mapped if mapped.count(name) > 1})
        if duplicated:
            raise TypeError(f"{cls.__name__} decode table maps fields twice: {duplicated}")
        unmapped = sorted(set(fields) - set(mapped))
        if unmapped:
            raise TypeError(f"{cls.__name__} fields missing from decode table: {unmapped}")

        for entry in entries:
            if entry.required != fields[entry.field].is_required():
                raise TypeError(
                    f"{cls.__name__}.{entry.field}: decode table required={entry.required} "
                    f"but model field required={fields[entry.field].is_required()}"
                )
            if isinstance(entry, XmlAttr) and entry.required and entry.tolerant:
                raise TypeError(f"{cls.__name__}.{entry.field}: required fields cannot be tolerant")
            if (
                isinstance(entry, XmlChild)
                and entry.kind is not ChildKind.GROUP
                and entry.tag != entry.model.TAG
            ):
                raise TypeError(
                    f"{cls.__name__}.{entry.field}: child tag <{entry.tag}> does not match "
                    f"{entry.model.__name__}.TAG <{entry.model.TAG}>"
                )

    @classmethod
    def decode(cls, cursor: XmlCursor, element: ET.Element) -> Self:
        """Decode one entity from its start tag.

        Consumes ``element``'s attributes and its whole subtree, leaving the
        cursor just after ``element``'s end tag. Unknown attributes and
        unknown child elements are ignored.

        Args:
            cursor: Cursor positioned just after ``element``'s start event
            element: Start element; its tag must equal ``TAG``

        Returns:
            The decoded entity

        Raises:
            MissingRequiredFieldError: If a required attribute or child is absent
            InvalidValueError: If a non-tolerant attribute is malformed
            MalformedXmlError: On broken markup or a duplicated single child
        """
        assert element.tag == cls.TAG, f"{cls.__name__}.decode called on <{element.tag}>"

        attributes = _attribute_index(cls)
        values: dict[str, Any] = {}
        for xml_name, raw in element.attrib.items():
            spec = attributes.get(xml_name)
            if spec is None:
                continue
            try:
                values[spec.field] = spec.parse(raw)
            except InvalidValueError as e:
                if spec.tolerant:
                    logger.debug(f"Using default for {cls.TAG}.{xml_name}: {e}")
                    continue
                e.add_note(f"while decoding <{cls.TAG}> attribute {xml_name}")
                raise

        for spec in cls.XML_ATTRIBUTES:
            if spec.required and _is_missing(values.get(spec.field)):
                raise MissingRequiredFieldError(cls.TAG, spec.xml_name)

        child_specs = _child_index(cls)
        repeated: dict[str, list[GdtfNode]] = {}
        for child in cursor.children(element):
            child_spec = child_specs.get(child.tag)
            if child_spec is None:
                logger.debug(f"Skipping unmodeled <{child.tag}> in <{cls.TAG}>")
                continue

            if child_spec.kind is ChildKind.EACH:
                repeated.setdefault(child_spec.field, []).append(
                    child_spec.model.decode(cursor, child)
                )
            elif child_spec.field in values:
                raise MalformedXmlError(f"Duplicate <{child.tag}> in <{cls.TAG}>")
            elif child_spec.kind is ChildKind.GROUP:
                values[child_spec.field] = child_spec.model.decode_many(cursor, child)
            else:
                values[child_spec.field] = child_spec.model.decode(cursor, child)

        for field, items in repeated.items():
            values[field] = tuple(items)

        for child_spec in cls.XML_CHILDREN:
            if child_spec.required and child_spec.field not in values:
                raise MissingRequiredFieldError(cls.TAG, child_spec.tag)

        return cls(**values)

    @classmethod
    def decode_many(cls, cursor: XmlCursor, group: ET.Element) -> tuple[Self, ...]:
        """Decode every direct child of ``group`` tagged ``TAG``, in order.

        Children with other tags are skipped.

        Args:
            cursor: Cursor positioned just after ``group``'s start event
            group: Plural wrapper element (e.g. ``<FeatureGroups>``)

        Returns:
            Decoded entities in document order
        """
        items: list[Self] = []
        for child in cursor.children(group):
            if child.tag == cls.TAG:
                items.append(cls.decode(cursor, child))
            else:
                logger.debug(f"Skipping <{child.tag}> in <{group.tag}>, expected <{cls.TAG}>")
        return tuple(items)
