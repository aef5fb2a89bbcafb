"""Tests for author/editor name reordering."""

import pytest

from dblpbib.fixers.names import DEFAULT_PARTICLES, last_name_start, reorder_name


@pytest.mark.unit
def test_reorder_simple_name():
    assert reorder_name("Christoph Jabs") == "Jabs, Christoph"


@pytest.mark.unit
def test_reorder_particle_starts_last_name():
    assert reorder_name("Daniel Le Berre") == "Le Berre, Daniel"


@pytest.mark.unit
def test_reorder_lowercase_token_starts_last_name():
    assert reorder_name("Maria Garcia de la Banda") == "de la Banda, Maria Garcia"
    assert reorder_name("Hans van Maaren") == "van Maaren, Hans"


@pytest.mark.unit
def test_reorder_middle_names_stay_with_first_name():
    assert reorder_name("Matti J. Järvisalo") == "Järvisalo, Matti J."


@pytest.mark.unit
def test_single_token_name_is_unchanged():
    assert reorder_name("Aristotle") == "Aristotle"


@pytest.mark.unit
def test_reorder_is_idempotent():
    once = reorder_name("Daniel Le Berre")
    assert reorder_name(once) == once


@pytest.mark.unit
def test_custom_particles():
    assert reorder_name("Ludwig Van Beethoven", particles=frozenset()) == "Beethoven, Ludwig Van"
    assert reorder_name("Jan Ter Horst", particles={"Ter"}) == "Ter Horst, Jan"


@pytest.mark.unit
def test_last_name_start_prefers_lowercase_over_particle():
    tokens = ["Anna", "La", "Maria", "de", "Souza"]
    assert last_name_start(tokens, DEFAULT_PARTICLES) == 3
