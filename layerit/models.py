"""
Product and compatibility models for LayerIt.

This module defines the value types shared by the core package and the
Streamlit front end:
- Product: a catalog entry, loaded once from the static dataset
- ConflictRule: a fixed pair of ingredients that should not be layered
- CompatibilityResult: the derived verdict for a pair of products

Product and ConflictRule are frozen; CompatibilityResult is recomputed on every
comparison and thrown away when the comparison is cleared.
"""

from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field

Severity = Literal["safe", "caution", "danger"]

SEVERITY_SAFE = "safe"
SEVERITY_CAUTION = "caution"
SEVERITY_DANGER = "danger"


class Product(BaseModel):
    """
    A skincare product from the static catalog.

    The dataset uses camelCase for the skin type tags ("skinTypes"); both the
    alias and the field name are accepted.
    """
    id: int = Field(..., description="Unique product identifier")
    name: str = Field(..., description="Product name")
    brand: str = Field(..., description="Brand name")
    description: str = Field("", description="Free-text product description")
    ingredients: List[str] = Field(default_factory=list, description="Key ingredients, in label order")
    skin_types: List[str] = Field(
        default_factory=list,
        alias="skinTypes",
        description="Skin types this product is suited for",
    )

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Midnight Renewal Serum",
                "brand": "Lumière Lab",
                "description": "Gentle overnight retinol serum.",
                "ingredients": ["retinol", "squalane", "peptides"],
                "skinTypes": ["normal", "dry", "combination"],
            }
        },
    )

    @property
    def ingredient_keys(self) -> List[str]:
        """Lower-cased ingredient names used for rule matching."""
        return [ingredient.lower() for ingredient in self.ingredients]


class ConflictRule(BaseModel):
    """An unordered pair of ingredients and how risky it is to combine them."""
    ingredient_a: str = Field(..., description="First ingredient (lower case)")
    ingredient_b: str = Field(..., description="Second ingredient (lower case)")
    severity: Severity = Field(..., description="How serious the interaction is")
    explanation: str = Field(..., description="Why the pair conflicts and what to do instead")

    model_config = ConfigDict(frozen=True)

    def matches(self, ingredient_x: str, ingredient_y: str) -> bool:
        """
        Check whether two lower-cased ingredient names form this rule's pair.

        The pair is unordered: (a, b) and (b, a) both match.
        """
        return (
            (ingredient_x == self.ingredient_a and ingredient_y == self.ingredient_b)
            or (ingredient_x == self.ingredient_b and ingredient_y == self.ingredient_a)
        )


class CompatibilityResult(BaseModel):
    """Outcome of comparing two products against the conflict rules."""
    verdict: Severity
    conflicts: List[ConflictRule] = Field(default_factory=list)
    message: str

    @property
    def is_safe(self) -> bool:
        return self.verdict == SEVERITY_SAFE
