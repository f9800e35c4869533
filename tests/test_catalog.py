"""Tests for the objective template catalog."""

import dataclasses

import pytest

from levelsmith import ObjectiveCatalog, ObjectiveTemplate, default_catalog
from levelsmith.resources.objective_catalog import SURVIVAL, catalog_summary


def test_default_catalog_contents(catalog):
    assert len(catalog) == 5
    assert catalog.type_ids() == ["survival", "elimination", "collection", "escort", "exploration"]
    assert catalog_summary(catalog) == {t: 2 for t in catalog.type_ids()}
    assert "escort" in catalog
    assert "racing" not in catalog
    assert catalog.get("racing") is None


def test_stock_templates():
    catalog = default_catalog()
    assert [(t.difficulty, t.base_reward) for t in catalog.templates] == [
        (0.6, 100), (0.7, 150), (0.4, 80), (0.8, 200), (0.5, 120),
    ]
    for template in catalog.templates:
        for variant in template.variants:
            assert variant.hints
            for candidates in variant.parameters.values():
                if isinstance(candidates, tuple) and all(isinstance(c, int) for c in candidates):
                    assert list(candidates) == sorted(candidates)


def test_restricted_catalog_keeps_order(catalog):
    reduced = catalog.restricted_to(["exploration", "survival"])
    assert reduced.type_ids() == ["survival", "exploration"]
    assert len(catalog) == 5


def test_from_templates_and_duplicates():
    assert ObjectiveCatalog.from_templates([SURVIVAL]).type_ids() == ["survival"]
    with pytest.raises(ValueError, match="Duplicate"):
        ObjectiveCatalog.from_templates([SURVIVAL, SURVIVAL])


def test_catalog_is_read_only(catalog):
    with pytest.raises(dataclasses.FrozenInstanceError):
        catalog.templates = ()
    with pytest.raises(dataclasses.FrozenInstanceError):
        catalog.get("survival").base_reward = 1


def test_empty_catalog():
    empty = ObjectiveCatalog()
    assert len(empty) == 0
    assert empty.type_ids() == []
    assert catalog_summary(empty) == {}
    assert isinstance(ObjectiveTemplate("x", "X", "", 0.1, 10), ObjectiveTemplate)
