"""Tests for battlerow.card and battlerow.enums."""

from types import SimpleNamespace

import pytest

from battlerow.card import BattleCard, UnitCard, ensure_battle_card
from battlerow.enums import CardAbility, RowPosition
from battlerow.exceptions import InvalidCardError


class TestUnitCard:
    def test_strength_defaults_to_base(self):
        card = UnitCard(id="a", name="A", base_strength=6)
        assert card.strength == 6

    def test_string_ability_coerced(self):
        card = UnitCard(id="a", name="A", base_strength=1, ability="morale_boost")
        assert card.ability is CardAbility.MORALE_BOOST

    def test_unknown_ability_rejected(self):
        with pytest.raises(ValueError):
            UnitCard(id="a", name="A", base_strength=1, ability="scorch")

    def test_non_integer_strength_rejected(self):
        with pytest.raises(InvalidCardError):
            UnitCard(id="a", name="A", base_strength="5")
        with pytest.raises(InvalidCardError):
            UnitCard(id="a", name="A", base_strength=True)

    @pytest.mark.parametrize("ability", [1, 0, None, True])
    def test_non_enum_ability_rejected(self, ability):
        with pytest.raises(InvalidCardError) as exc_info:
            UnitCard(id="a", name="A", base_strength=1, ability=ability)
        assert exc_info.value.missing == ["ability"]

    def test_hero_strength_pinned_to_base(self):
        hero = UnitCard(id="h", name="H", base_strength=10, is_hero=True, strength=3)
        assert hero.strength == 10

    def test_from_dict_hero_ignores_strength(self):
        hero = UnitCard.from_dict(
            {"id": "h", "base_strength": 10, "is_hero": True, "strength": 25}
        )
        assert hero.strength == hero.base_strength == 10

    def test_from_dict_integer_ability_rejected(self):
        with pytest.raises(InvalidCardError):
            UnitCard.from_dict({"id": "x", "base_strength": 2, "ability": 1})

    def test_display_name_marks_hero(self):
        assert UnitCard(id="h", name="Geralt", base_strength=15, is_hero=True).display_name == "★Geralt"
        assert UnitCard(id="f", name="Footman", base_strength=1).display_name == "Footman"

    def test_to_dict_from_dict(self):
        card = UnitCard(id="d", name="Drummer", base_strength=4,
                        ability=CardAbility.MORALE_BOOST, strength=7)
        data = card.to_dict()
        assert data["ability"] == "morale_boost"
        restored = UnitCard.from_dict(data)
        assert restored == card

    def test_from_dict_defaults(self):
        card = UnitCard.from_dict({"id": "x", "base_strength": 2})
        assert card.name == "x"
        assert card.is_hero is False
        assert card.ability is CardAbility.NONE
        assert card.strength == 2

    def test_from_dict_missing_field(self):
        with pytest.raises(InvalidCardError) as exc_info:
            UnitCard.from_dict({"id": "x"})
        assert exc_info.value.missing == ["base_strength"]


class TestContract:
    def test_unit_card_satisfies_protocol(self):
        assert isinstance(UnitCard(id="a", name="A", base_strength=1), BattleCard)

    def test_duck_typed_object_accepted(self):
        card = SimpleNamespace(base_strength=1, strength=1, is_hero=False,
                               ability=CardAbility.NONE)
        assert ensure_battle_card(card) is card

    def test_missing_attributes_reported(self):
        with pytest.raises(InvalidCardError) as exc_info:
            ensure_battle_card(SimpleNamespace(base_strength=1))
        assert exc_info.value.missing == ["strength", "is_hero", "ability"]

    def test_raw_ability_code_rejected(self):
        card = SimpleNamespace(base_strength=1, strength=1, is_hero=False, ability=1)
        with pytest.raises(InvalidCardError):
            ensure_battle_card(card)


class TestEnums:
    def test_row_index(self):
        assert [p.index for p in RowPosition] == [0, 1, 2]

    @pytest.mark.parametrize("value", [RowPosition.SIEGE, "siege", "SIEGE", 2])
    def test_row_from_value(self, value):
        assert RowPosition.from_value(value) is RowPosition.SIEGE

    @pytest.mark.parametrize("value", [3, -1, "air", True])
    def test_row_from_bad_value(self, value):
        with pytest.raises(ValueError):
            RowPosition.from_value(value)

    def test_only_morale_boost_penalizes(self):
        assert [a for a in CardAbility if a.penalizes_morale] == [CardAbility.MORALE_BOOST]
