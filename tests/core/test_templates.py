"""
Tests for entity templates.
"""

from finplanlab import (
    ENTITY_CATEGORY_SORT_ORDER,
    EntityCategory,
    K,
    get_entity_template,
    get_templates_for_kind,
)


class TestTemplates:
    def test_lookup_by_key(self):
        template = get_entity_template("mortgage")
        assert template.name == "Mortgage"
        assert template.kind == K.DEBT
        assert template.category is EntityCategory.DEBT

    def test_unknown_key(self):
        assert get_entity_template("spaceship") is None

    def test_templates_for_kind(self):
        keys = [t.key for t in get_templates_for_kind("HOLDING")]
        assert keys == ["etf", "mutual-fund", "stock"]

    def test_every_template_uses_a_serializable_kind(self):
        kinds = set(K.serializable_kinds())
        templates = [t for kind in kinds for t in get_templates_for_kind(kind)]
        assert len(templates) == 20
        assert all(t.kind in kinds for t in templates)

    def test_category_order(self):
        assert ENTITY_CATEGORY_SORT_ORDER[0] is EntityCategory.INCOME
        assert set(ENTITY_CATEGORY_SORT_ORDER) == set(EntityCategory)
