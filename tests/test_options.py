"""Tests for selector option derivation."""

from showcase.application.services.options import (
    all_option,
    derive_options,
    label_sort_key,
    resolve_selected_option,
    static_options,
)
from showcase.domain.catalogs import CREATIVE_TYPE_FILTER, FORMAT_FILTER
from showcase.domain.models.core import SelectOption


def test_all_option_comes_first_and_records_sorted():
    records = [
        {"id": 3, "name": "react"},
        {"id": 1, "name": "Angular"},
        {"id": 2, "name": "Élan"},
        {"id": 4, "name": "django"},
    ]
    options = derive_options(records, "Technologies")
    assert options[0] == SelectOption("", "All Technologies")
    assert [o.label for o in options[1:]] == ["Angular", "django", "Élan", "react"]
    assert [o.value for o in options[1:]] == ["1", "4", "2", "3"]


def test_label_fallback_fields():
    records = [{"id": 1, "client_name": "Acme"}, {"id": 2, "name": "Globex"}]
    options = derive_options(records, "Clients", ("client_name", "name"))
    assert [o.label for o in options] == ["All Clients", "Acme", "Globex"]


def test_empty_reference_list():
    assert derive_options([], "Clients") == [all_option("Clients")]


def test_static_options_keep_declared_order():
    assert [o.label for o in static_options(FORMAT_FILTER)] == [
        "All Formats", "Landscape", "Portrait", "Square",
    ]


def test_static_options_sorted_when_requested():
    assert [o.value for o in static_options(CREATIVE_TYPE_FILTER)] == ["", "BROCHURE", "LOGO"]


def test_label_sort_key_ignores_case_and_accents():
    assert label_sort_key("Éclair") == label_sort_key("eclair")


def test_symbols_and_digits_sort_before_letters():
    records = [
        {"id": 1, "name": "Zeta"},
        {"id": 2, "name": "~Tilde Studio"},
        {"id": 3, "name": "alpha"},
        {"id": 4, "name": "3D Works"},
    ]
    labels = [o.label for o in derive_options(records, "Clients")[1:]]
    assert labels == ["~Tilde Studio", "3D Works", "alpha", "Zeta"]


def test_space_sorts_before_letters_within_label():
    records = [{"id": 1, "name": "Acmeco"}, {"id": 2, "name": "Acme Co"}]
    assert [o.label for o in derive_options(records, "Clients")[1:]] == ["Acme Co", "Acmeco"]


class TestResolveSelectedOption:
    options = [all_option("Clients"), SelectOption("1", "Acme"), SelectOption("2", "Globex")]

    def test_exact_match(self):
        assert resolve_selected_option(self.options, "2").label == "Globex"

    def test_unset_value_selects_all(self):
        assert resolve_selected_option(self.options, "").label == "All Clients"
        assert resolve_selected_option(self.options, None).label == "All Clients"

    def test_stale_value_falls_back_to_first(self):
        assert resolve_selected_option(self.options, "99").label == "All Clients"

    def test_empty_options(self):
        assert resolve_selected_option([], "1") is None
