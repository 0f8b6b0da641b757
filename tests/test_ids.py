import pytest

from stripe_issuing.core.domain import Authorization, Card, Cardholder
from stripe_issuing.core.errors import InvalidReferenceError
from stripe_issuing.core.ids import coerce_ids, resolve_id


class TestResolveId:
    @pytest.mark.parametrize("value", ["iauth_1", "ic_abc", ""])
    def test_bare_id_is_returned_unchanged(self, value):
        assert resolve_id(value) == value

    @pytest.mark.parametrize(
        "value, expected",
        [
            (Authorization(id="iauth_9"), "iauth_9"),
            (Card(id="ic_9", last4="4242"), "ic_9"),
            (Cardholder(id="ich_9"), "ich_9"),
        ],
    )
    def test_resource_resolves_to_its_id(self, value, expected):
        assert resolve_id(value) == expected

    def test_resource_without_id_is_rejected(self):
        with pytest.raises(InvalidReferenceError):
            resolve_id(Authorization(amount=100))

    @pytest.mark.parametrize("value", [None, 42, {"id": "iauth_1"}])
    def test_other_values_are_rejected(self, value):
        with pytest.raises(InvalidReferenceError):
            resolve_id(value)


class TestCoerceIds:
    def test_resources_under_named_fields_become_ids(self):
        params = {
            "card": Card(id="ic_1"),
            "cardholder": "ich_1",
            "starting_after": Authorization(id="iauth_5"),
            "limit": 3,
        }

        out = coerce_ids(params, {"card", "cardholder", "starting_after", "ending_before"})

        assert out == {
            "card": "ic_1",
            "cardholder": "ich_1",
            "starting_after": "iauth_5",
            "limit": 3,
        }

    def test_fields_outside_the_set_are_left_alone(self):
        card = Card(id="ic_1")

        out = coerce_ids({"card": card}, {"cardholder"})

        assert out["card"] is card

    def test_input_is_not_mutated(self):
        card = Card(id="ic_1")
        params = {"card": card}

        coerce_ids(params, {"card"})

        assert params == {"card": card}

    def test_idempotent(self):
        params = {"card": Card(id="ic_1"), "ending_before": Authorization(id="iauth_2"), "status": "pending"}
        fields = {"card", "ending_before"}

        once = coerce_ids(params, fields)

        assert coerce_ids(once, fields) == once

    def test_id_less_resource_fails(self):
        with pytest.raises(InvalidReferenceError):
            coerce_ids({"card": Card(last4="4242")}, {"card"})
