"""Attribute definition entities.

The attribute catalog of a fixture type: which controllable properties it
has (Attributes), how they are classified (FeatureGroups/Features) and
which are mutually exclusive at control time (ActivationGroups).
"""

from __future__ import annotations

from pydantic import Field

from gdtfkit.core.parsers.decode import ChildKind, GdtfNode, XmlAttr, XmlChild
from gdtfkit.core.units import (
    ColorCie,
    Node,
    PathNode,
    PhysicalUnit,
    parse_name,
    parse_node,
)


class ActivationGroup(GdtfNode):
    """Group of attributes that can only be controlled together."""

    TAG = "ActivationGroup"
    XML_ATTRIBUTES = (XmlAttr("Name", "name", parse_name, required=True),)

    name: str = Field(..., description="Unique name of the activation group")


class Feature(GdtfNode):
    """One control purpose within a feature group (e.g. PanTilt)."""

    TAG = "Feature"
    XML_ATTRIBUTES = (XmlAttr("Name", "name", parse_name, required=True),)

    name: str = Field(..., description="Feature name, unique within its group")


class FeatureGroup(GdtfNode):
    """Grouping of features (e.g. Position, Color, Beam)."""

    TAG = "FeatureGroup"
    XML_ATTRIBUTES = (
        XmlAttr("Name", "name", parse_name, required=True),
        XmlAttr("Pretty", "pretty", parse_name, required=True),
    )
    XML_CHILDREN = (XmlChild("Feature", "features", Feature, ChildKind.EACH),)

    name: str = Field(..., description="Unique name of the feature group")
    pretty: str = Field(..., description="Display name")
    features: tuple[Feature, ...] = Field(default=(), description="Features of this group")

    def find_feature(self, name: str) -> Feature | None:
        return next((feature for feature in self.features if feature.name == name), None)


class Attribute(GdtfNode):
    """One controllable property of the fixture (e.g. Pan, Dimmer, Gobo1).

    Attributes:
        name: Unique attribute name
        pretty: Short display name
        activation_group: Link to an ActivationGroup, None if absent
        feature: Link to ``FeatureGroup.Feature``
        main_attribute: Link to the attribute this one is a sub-attribute of
        physical_unit: Unit of the physical range of channel functions
        color: Color of the attribute for color-mixing attributes
    """

    TAG = "Attribute"
    XML_ATTRIBUTES = (
        XmlAttr("Name", "name", parse_name, required=True),
        XmlAttr("Pretty", "pretty", parse_name, required=True),
        XmlAttr("ActivationGroup", "activation_group", parse_node),
        XmlAttr("Feature", "feature", parse_node, required=True),
        XmlAttr("MainAttribute", "main_attribute", parse_node),
        XmlAttr("PhysicalUnit", "physical_unit", PhysicalUnit.parse),
        XmlAttr("Color", "color", ColorCie.parse),
    )

    name: str = Field(..., description="Unique attribute name")
    pretty: str = Field(..., description="Short display name")
    activation_group: Node | None = Field(default=None, description="ActivationGroup link")
    feature: Node = Field(..., description="FeatureGroup.Feature link")
    main_attribute: Node | None = Field(default=None, description="Main attribute link")
    physical_unit: PhysicalUnit = Field(default=PhysicalUnit.NONE, description="Physical unit")
    color: ColorCie | None = Field(default=None, description="Attribute color (CIE xyY)")


class AttributeDefinitions(GdtfNode):
    """Catalog of activation groups, feature groups and attributes."""

    TAG = "AttributeDefinitions"
    XML_CHILDREN = (
        XmlChild("ActivationGroups", "activation_groups", ActivationGroup, ChildKind.GROUP),
        XmlChild("FeatureGroups", "feature_groups", FeatureGroup, ChildKind.GROUP),
        XmlChild("Attributes", "attributes", Attribute, ChildKind.GROUP),
    )

    activation_groups: tuple[ActivationGroup, ...] = Field(default=())
    feature_groups: tuple[FeatureGroup, ...] = Field(default=())
    attributes: tuple[Attribute, ...] = Field(default=())

    def find_attribute(self, name: str) -> Attribute | None:
        return next((attr for attr in self.attributes if attr.name == name), None)

    def find_feature_group(self, name: str) -> FeatureGroup | None:
        return next((group for group in self.feature_groups if group.name == name), None)

    def find_activation_group(self, name: str) -> ActivationGroup | None:
        return next((group for group in self.activation_groups if group.name == name), None)

    def dangling_references(self) -> list[str]:
        """List attribute links that do not resolve within this catalog.

        Links are matched by name; nothing is rewritten. An empty list means
        every activation-group, feature and main-attribute link resolves.

        Returns:
            One human-readable message per unresolved link
        """
        problems: list[str] = []
        for attr in self.attributes:
            group = attr.activation_group
            if isinstance(group, PathNode) and self.find_activation_group(group.name) is None:
                problems.append(f"Attribute {attr.name!r}: unknown ActivationGroup {str(group)!r}")

            feature = attr.feature
            if isinstance(feature, PathNode):
                feature_group = (
                    self.find_feature_group(feature.segments[0])
                    if len(feature.segments) == 2
                    else None
                )
                if feature_group is None or feature_group.find_feature(feature.name) is None:
                    problems.append(f"Attribute {attr.name!r}: unknown Feature {str(feature)!r}")

            main = attr.main_attribute
            if isinstance(main, PathNode) and self.find_attribute(main.name) is None:
                problems.append(f"Attribute {attr.name!r}: unknown MainAttribute {str(main)!r}")
        return problems
