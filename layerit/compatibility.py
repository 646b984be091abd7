"""
Ingredient compatibility matcher.

Compares the ingredient lists of two products against a fixed table of
conflict rules and derives an overall verdict:
- no matched rule -> "safe"
- any matched "danger" rule -> "danger", even alongside "caution" matches
- otherwise any matched "caution" rule -> "caution"
- otherwise -> "safe"

Ingredient names are compared case-insensitively and must match exactly;
rule pairs are unordered. The matcher is a pure, total function.
"""

from itertools import combinations
from typing import List, Sequence, Tuple

from layerit.models import (
    SEVERITY_CAUTION,
    SEVERITY_DANGER,
    SEVERITY_SAFE,
    CompatibilityResult,
    ConflictRule,
    Product,
)

SAFE_MESSAGE = "These products are safe to use together!"
CAUTION_MESSAGE = "Use with caution. Consider separating AM/PM."
DANGER_MESSAGE = "Do not use these products together."

CONFLICT_RULES: Tuple[ConflictRule, ...] = (
    ConflictRule(
        ingredient_a="retinol",
        ingredient_b="vitamin c",
        severity=SEVERITY_CAUTION,
        explanation="Retinol and Vitamin C can be irritating when used together. Use one in AM, one in PM.",
    ),
    ConflictRule(
        ingredient_a="retinol",
        ingredient_b="aha",
        severity=SEVERITY_DANGER,
        explanation="Retinol and AHAs can cause severe irritation and damage the skin barrier. Do not use together.",
    ),
    ConflictRule(
        ingredient_a="retinol",
        ingredient_b="bha",
        severity=SEVERITY_DANGER,
        explanation="Retinol and BHA can over-exfoliate and cause redness. Separate by at least 24 hours.",
    ),
    ConflictRule(
        ingredient_a="retinol",
        ingredient_b="benzoyl peroxide",
        severity=SEVERITY_DANGER,
        explanation="Benzoyl peroxide can oxidize retinol, making both ingredients ineffective and irritating.",
    ),
    ConflictRule(
        ingredient_a="vitamin c",
        ingredient_b="niacinamide",
        severity=SEVERITY_CAUTION,
        explanation="Older formulations may cause flushing. Modern formulations are generally safe, but monitor for redness.",
    ),
    ConflictRule(
        ingredient_a="vitamin c",
        ingredient_b="aha",
        severity=SEVERITY_CAUTION,
        explanation="Both are acidic and may cause irritation. Use at different times of day if sensitive.",
    ),
    ConflictRule(
        ingredient_a="aha",
        ingredient_b="bha",
        severity=SEVERITY_CAUTION,
        explanation="Using multiple exfoliants together can over-exfoliate. Start slowly and monitor skin response.",
    ),
    ConflictRule(
        ingredient_a="benzoyl peroxide",
        ingredient_b="vitamin c",
        severity=SEVERITY_DANGER,
        explanation="Benzoyl peroxide oxidizes Vitamin C, reducing effectiveness of both. Use separately.",
    ),
    ConflictRule(
        ingredient_a="retinol",
        ingredient_b="peptides",
        severity=SEVERITY_CAUTION,
        explanation="Retinol can break down peptides. Use peptides in AM and retinol in PM for best results.",
    ),
)


def find_conflicts(
    product_a: Product,
    product_b: Product,
    rules: Sequence[ConflictRule] = CONFLICT_RULES,
) -> List[ConflictRule]:
    """
    Collect every rule matched by an ingredient pair across the two products.

    Every ingredient of product_a is checked against every ingredient of
    product_b, and each pair against every rule. A rule is listed once per
    matching ingredient pair, in iteration order.
    """
    conflicts: List[ConflictRule] = []
    ingredients_b = product_b.ingredient_keys
    for ingredient_a in product_a.ingredient_keys:
        for ingredient_b in ingredients_b:
            for rule in rules:
                if rule.matches(ingredient_a, ingredient_b):
                    conflicts.append(rule)
    return conflicts


def check_compatibility(
    product_a: Product,
    product_b: Product,
    rules: Sequence[ConflictRule] = CONFLICT_RULES,
) -> CompatibilityResult:
    """
    Check whether two products can be layered.

    Args:
        product_a: First product
        product_b: Second product
        rules: Conflict rule table (defaults to CONFLICT_RULES)

    Returns:
        CompatibilityResult with the verdict, matched rules and a user-facing
        message. A "safe" verdict always carries an empty conflict list.

    Examples:
        >>> retinol = Product(id=1, name="A", brand="X", ingredients=["Retinol"])
        >>> bp = Product(id=2, name="B", brand="Y", ingredients=["benzoyl peroxide"])
        >>> check_compatibility(retinol, bp).verdict
        'danger'
    """
    conflicts = find_conflicts(product_a, product_b, rules)

    if not conflicts:
        return CompatibilityResult(verdict=SEVERITY_SAFE, conflicts=[], message=SAFE_MESSAGE)

    if any(rule.severity == SEVERITY_DANGER for rule in conflicts):
        return CompatibilityResult(verdict=SEVERITY_DANGER, conflicts=conflicts, message=DANGER_MESSAGE)

    if any(rule.severity == SEVERITY_CAUTION for rule in conflicts):
        return CompatibilityResult(verdict=SEVERITY_CAUTION, conflicts=conflicts, message=CAUTION_MESSAGE)

    return CompatibilityResult(verdict=SEVERITY_SAFE, conflicts=[], message=SAFE_MESSAGE)


def check_routine_compatibility(
    products: Sequence[Product],
    rules: Sequence[ConflictRule] = CONFLICT_RULES,
) -> List[Tuple[Product, Product, CompatibilityResult]]:
    """
    Check every unordered pair of products in a routine.

    Args:
        products: Routine products, in routine order
        rules: Conflict rule table (defaults to CONFLICT_RULES)

    Returns:
        (product_a, product_b, result) for each pair whose verdict is not
        "safe", in pair order (first product's position, then second's)
    """
    flagged = []
    for product_a, product_b in combinations(products, 2):
        result = check_compatibility(product_a, product_b, rules)
        if not result.is_safe:
            flagged.append((product_a, product_b, result))
    return flagged
