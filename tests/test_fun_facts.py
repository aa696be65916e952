"""Tests for fun facts"""

import random

from cultura.fun_facts import (
    get_all_fun_facts,
    get_fun_fact_categories,
    get_fun_facts_by_category,
    get_random_fun_fact,
)


def test_every_fact_has_all_fields():
    for fact in get_all_fun_facts():
        assert set(fact) == {"id", "icon", "category", "source", "fact"}


def test_random_fact_is_reproducible_with_seeded_rng():
    assert get_random_fun_fact(random.Random(7)) == get_random_fun_fact(random.Random(7))


def test_categories_in_first_seen_order():
    categories = get_fun_fact_categories()
    assert categories[0] == "Geography"
    assert len(categories) == len(set(categories))


def test_filter_by_category():
    facts = get_fun_facts_by_category("Wildlife")
    assert facts and all(f["category"] == "Wildlife" for f in facts)
    assert get_fun_facts_by_category("Astronomy") == []


def test_returned_facts_are_copies():
    get_all_fun_facts()[0]["fact"] = "changed"
    assert get_all_fun_facts()[0]["fact"] != "changed"
