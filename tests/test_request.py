import pytest

from stripe_issuing.core.config import RequestOptions
from stripe_issuing.core.domain import Card
from stripe_issuing.core.errors import RequestConfigurationError
from stripe_issuing.core.services.request import Method, Request


class TestRequestBuilder:
    def test_new_accepts_mapping_options(self):
        request = Request.new({"api_key": "sk_test_other", "expand": ["card"]})

        assert request.options == RequestOptions(api_key="sk_test_other", expand=("card",))

    def test_each_step_returns_a_new_request(self):
        base = Request.new()

        built = base.set_endpoint("issuing/authorizations").set_method("get")

        assert base.endpoint is None and base.method is None
        assert built.endpoint == "issuing/authorizations"
        assert built.method is Method.GET

    def test_leading_slash_is_dropped(self):
        assert Request.new().set_endpoint("/issuing/authorizations").endpoint == "issuing/authorizations"

    def test_unknown_method_is_rejected(self):
        with pytest.raises(RequestConfigurationError):
            Request.new().set_method("PATCH")

    def test_set_params_merges(self):
        request = Request.new().set_params({"limit": 3}).set_params({"status": "pending"})

        assert request.params == {"limit": 3, "status": "pending"}

    @pytest.mark.parametrize(
        "request_",
        [
            Request.new().set_method(Method.GET),
            Request.new().set_endpoint("issuing/authorizations"),
        ],
    )
    def test_validate_requires_endpoint_and_method(self, request_):
        with pytest.raises(RequestConfigurationError):
            request_.validate()

    def test_validate_returns_the_method(self):
        request = Request.new().set_endpoint("issuing/authorizations").set_method("post")

        assert request.validate() is Method.POST


class TestExpansions:
    def test_defaults_are_merged_without_duplicates(self):
        request = (
            Request.new()
            .set_params({"expand": ["cardholder", "card"]})
            .add_expansions(["card", "transactions"])
        )

        assert request.wire_params()["expand"] == ["cardholder", "card", "transactions"]

    def test_per_call_expansions_are_merged(self):
        request = Request.new({"expand": ["card"]}).add_expansions(["cardholder"])

        assert request.wire_params()["expand"] == ["card", "cardholder"]

    def test_no_expand_parameter_when_nothing_requested(self):
        assert "expand" not in Request.new().set_params({"limit": 1}).wire_params()

    def test_prefix_points_expansions_at_list_elements(self):
        request = Request.new({"expand": ["card", "data.cardholder"]}).add_expansions(["transactions"])

        prefixed = request.prefix_expansions()

        assert prefixed.wire_params()["expand"] == ["data.card", "data.cardholder", "data.transactions"]
        assert request.options.expand == ("card", "data.cardholder")


class TestCastToId:
    def test_wire_params_sends_ids_for_declared_fields(self):
        request = (
            Request.new()
            .set_params({"card": Card(id="ic_1"), "status": "pending"})
            .with_cast_to_id(["card"])
        )

        assert request.wire_params() == {"card": "ic_1", "status": "pending"}
        assert isinstance(request.params["card"], Card)
