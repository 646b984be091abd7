"""
Tests for the ingredient compatibility matcher.

This module tests check_compatibility, find_conflicts and
check_routine_compatibility in layerit.compatibility, including the verdict
policy (danger beats caution), case-insensitive matching and pair order.
"""

import pytest

from layerit.catalog import get_product, load_products
from layerit.compatibility import (
    CAUTION_MESSAGE,
    CONFLICT_RULES,
    DANGER_MESSAGE,
    SAFE_MESSAGE,
    check_compatibility,
    check_routine_compatibility,
    find_conflicts,
)
from layerit.models import ConflictRule, Product


def make_product(product_id, *ingredients):
    return Product(
        id=product_id,
        name=f"Product {product_id}",
        brand="Test Brand",
        description="",
        ingredients=list(ingredients),
        skinTypes=["normal"],
    )


@pytest.fixture
def retinol_serum():
    return make_product(1, "retinol", "squalane")


@pytest.fixture
def vitamin_c_serum():
    return make_product(2, "vitamin c", "vitamin e")


@pytest.fixture
def spot_gel():
    return make_product(3, "benzoyl peroxide", "aloe vera")


@pytest.fixture
def hydrating_essence():
    return make_product(4, "hyaluronic acid", "glycerin")


@pytest.fixture
def barrier_cream():
    return make_product(5, "ceramides", "shea butter")


class TestConflictRules:
    """Test the fixed conflict rule table."""

    def test_nine_rules(self):
        """Test that the table holds the nine known interactions."""
        assert len(CONFLICT_RULES) == 9

    def test_rules_are_lower_case(self):
        """Test that rule ingredients are stored lower case for matching."""
        for rule in CONFLICT_RULES:
            assert rule.ingredient_a == rule.ingredient_a.lower()
            assert rule.ingredient_b == rule.ingredient_b.lower()

    def test_rule_severities(self):
        """Test that every rule is either caution or danger."""
        danger_pairs = {
            frozenset((r.ingredient_a, r.ingredient_b)) for r in CONFLICT_RULES if r.severity == "danger"
        }
        assert danger_pairs == {
            frozenset(("retinol", "aha")),
            frozenset(("retinol", "bha")),
            frozenset(("retinol", "benzoyl peroxide")),
            frozenset(("benzoyl peroxide", "vitamin c")),
        }
        assert all(r.severity in ("caution", "danger") for r in CONFLICT_RULES)

    def test_rule_matches_either_order(self):
        """Test that a rule pair is unordered."""
        rule = CONFLICT_RULES[0]
        assert rule.matches("retinol", "vitamin c")
        assert rule.matches("vitamin c", "retinol")
        assert not rule.matches("retinol", "retinol")

    def test_rules_are_immutable(self):
        """Test that rules cannot be modified."""
        with pytest.raises(Exception):
            CONFLICT_RULES[0].severity = "safe"


class TestCheckCompatibility:
    """Test the verdict policy of check_compatibility."""

    def test_no_conflicts_is_safe(self, hydrating_essence, barrier_cream):
        """Test that products without a conflicting pair are safe with no conflicts."""
        result = check_compatibility(hydrating_essence, barrier_cream)

        assert result.verdict == "safe"
        assert result.conflicts == []
        assert result.message == SAFE_MESSAGE
        assert result.is_safe

    def test_danger_pair(self, retinol_serum, spot_gel):
        """Test that retinol with benzoyl peroxide is dangerous."""
        result = check_compatibility(retinol_serum, spot_gel)

        assert result.verdict == "danger"
        assert len(result.conflicts) == 1
        assert result.conflicts[0].ingredient_b == "benzoyl peroxide"
        assert result.message == DANGER_MESSAGE

    def test_caution_pair(self, retinol_serum, vitamin_c_serum):
        """Test that retinol with vitamin C only warrants caution."""
        result = check_compatibility(retinol_serum, vitamin_c_serum)

        assert result.verdict == "caution"
        assert [r.severity for r in result.conflicts] == ["caution"]
        assert result.message == CAUTION_MESSAGE

    def test_danger_wins_over_caution(self):
        """Test that any danger match makes the verdict danger despite caution matches."""
        product_a = make_product(10, "retinol", "vitamin c")
        product_b = make_product(11, "niacinamide", "benzoyl peroxide")

        result = check_compatibility(product_a, product_b)

        severities = [r.severity for r in result.conflicts]
        assert result.verdict == "danger"
        assert "caution" in severities
        assert "danger" in severities

    def test_case_insensitive_match(self):
        """Test that ingredient case doesn't matter."""
        product_a = make_product(10, "Retinol")
        product_b = make_product(11, "VITAMIN C")

        result = check_compatibility(product_a, product_b)

        assert result.verdict == "caution"
        assert len(result.conflicts) == 1

    def test_exact_match_only(self):
        """Test that ingredient names must match exactly, not as substrings."""
        product_a = make_product(10, "retinol palmitate")
        product_b = make_product(11, "vitamin c")

        assert check_compatibility(product_a, product_b).verdict == "safe"

    def test_order_of_products_does_not_change_verdict(self, retinol_serum, spot_gel, vitamin_c_serum):
        """Test that swapping the products gives the same verdict."""
        assert check_compatibility(spot_gel, retinol_serum).verdict == "danger"
        assert check_compatibility(vitamin_c_serum, retinol_serum).verdict == "caution"

    def test_rule_listed_once_per_matching_pair(self):
        """Test that a rule matched by two ingredient pairs appears twice."""
        product_a = make_product(10, "retinol", "vitamin c")
        product_b = make_product(11, "vitamin c", "retinol")

        conflicts = find_conflicts(product_a, product_b)

        assert len(conflicts) == 2
        assert conflicts[0] == conflicts[1] == CONFLICT_RULES[0]

    def test_same_product_twice(self, retinol_serum):
        """Test that a product with no internal pair is safe with itself."""
        assert check_compatibility(retinol_serum, retinol_serum).verdict == "safe"

    def test_products_without_ingredients(self):
        """Test that empty ingredient lists are safe."""
        assert check_compatibility(make_product(10), make_product(11)).verdict == "safe"

    def test_safe_severity_match_reports_no_conflicts(self):
        """Test that matches of a 'safe' rule give a safe verdict with no conflicts."""
        rules = [
            ConflictRule(
                ingredient_a="glycerin",
                ingredient_b="squalane",
                severity="safe",
                explanation="Fine together.",
            )
        ]
        product_a = make_product(10, "glycerin")
        product_b = make_product(11, "squalane")

        result = check_compatibility(product_a, product_b, rules)

        assert result.verdict == "safe"
        assert result.conflicts == []

    def test_catalog_products(self):
        """Test known pairs from the bundled catalog."""
        catalog = load_products()
        renewal_serum = get_product(catalog, 1)
        spot_gel = get_product(catalog, 3)
        essence = get_product(catalog, 8)
        peptide_cream = get_product(catalog, 9)

        assert check_compatibility(renewal_serum, spot_gel).verdict == "danger"
        assert check_compatibility(renewal_serum, peptide_cream).verdict == "caution"
        assert check_compatibility(essence, peptide_cream).verdict == "safe"


class TestRoutineCompatibility:
    """Test pairwise checking of a whole routine."""

    def test_empty_and_single_product(self, retinol_serum):
        """Test that routines with fewer than two products have nothing to flag."""
        assert check_routine_compatibility([]) == []
        assert check_routine_compatibility([retinol_serum]) == []

    def test_flags_only_unsafe_pairs(self, retinol_serum, spot_gel, hydrating_essence):
        """Test that only conflicting pairs are returned."""
        flagged = check_routine_compatibility([retinol_serum, hydrating_essence, spot_gel])

        assert len(flagged) == 1
        product_a, product_b, result = flagged[0]
        assert (product_a.id, product_b.id) == (retinol_serum.id, spot_gel.id)
        assert result.verdict == "danger"

    def test_pairs_in_routine_order(self, retinol_serum, vitamin_c_serum, spot_gel):
        """Test that flagged pairs follow routine order."""
        flagged = check_routine_compatibility([retinol_serum, vitamin_c_serum, spot_gel])

        pairs = [(a.id, b.id, r.verdict) for a, b, r in flagged]
        assert pairs == [
            (1, 2, "caution"),
            (1, 3, "danger"),
            (2, 3, "danger"),
        ]
