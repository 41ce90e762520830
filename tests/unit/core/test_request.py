"""Unit tests for request descriptors and builders."""

from __future__ import annotations

import dataclasses

import pytest

from pagewalk.core import (
    ConfigurationError,
    HttpMethod,
    LimitAsOffset,
    OffsetField,
    RequestBuilder,
    RequestDescriptor,
    build_base_request,
)


class TestPaginationModes:
    """Test pagination mode validation."""

    def test_offset_field(self):
        mode = OffsetField("vidOffset", "vid-offset")
        assert mode.offset_param == "vidOffset"
        assert mode.result_offset_field == "vid-offset"

    @pytest.mark.parametrize("args", [("", "vid-offset"), ("vidOffset", "")])
    def test_offset_field_requires_names(self, args):
        with pytest.raises(ConfigurationError):
            OffsetField(*args)

    def test_limit_as_offset(self):
        mode = LimitAsOffset("offset", "limit", "250", "total")
        assert mode.limit == 250
        assert mode.strict_total is False

    def test_limit_as_offset_leading_zero_normalized(self):
        assert LimitAsOffset("offset", "limit", "010", "total").limit == 10

    def test_limit_as_offset_zero_allowed(self):
        assert LimitAsOffset("offset", "limit", "0", "total").limit == 0

    @pytest.mark.parametrize(
        "limit", ["-1", "ten", "", "2.5", "1_0", " 10", "+10", "10 ", "\uff11\uff10"]
    )
    def test_limit_as_offset_rejects_bad_limit(self, limit):
        with pytest.raises(ConfigurationError):
            LimitAsOffset("offset", "limit", limit, "total")

    def test_limit_as_offset_requires_names(self):
        with pytest.raises(ConfigurationError):
            LimitAsOffset("offset", "limit", "10", "")


class TestRequestDescriptor:
    """Test descriptor validation and query merging."""

    def test_method_normalized(self):
        descriptor = RequestDescriptor(method="get", path="/x")
        assert descriptor.method is HttpMethod.GET

    def test_unknown_method(self):
        with pytest.raises(ConfigurationError):
            RequestDescriptor(method="FETCH", path="/x")

    def test_empty_method(self):
        with pytest.raises(ConfigurationError, match="no http method set"):
            RequestDescriptor(method="", path="/x")

    def test_empty_path(self):
        with pytest.raises(ConfigurationError, match="no url path set"):
            RequestDescriptor(method="GET", path="")

    @pytest.mark.parametrize("status", [0, 600, -1])
    def test_success_status_range(self, status):
        with pytest.raises(ConfigurationError, match="http success code invalid"):
            RequestDescriptor(method="GET", path="/x", success_status=status)

    @pytest.mark.parametrize("status", ["200", True, 200.0, None])
    def test_success_status_must_be_int(self, status):
        with pytest.raises(ConfigurationError, match="http success code invalid"):
            RequestDescriptor(method="GET", path="/x", success_status=status)

    @pytest.mark.parametrize("status", [1, 204, 599])
    def test_success_status_bounds_accepted(self, status):
        assert RequestDescriptor(method="GET", path="/x", success_status=status).success_status == status

    def test_immutable(self):
        descriptor = RequestDescriptor(method="GET", path="/x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            descriptor.path = "/y"

    def test_mapping_params_become_pairs(self):
        descriptor = RequestDescriptor(method="GET", path="/x", query_params={"a": "1", "b": 2})
        assert descriptor.query_params == (("a", "1"), ("b", "2"))

    def test_merged_query_override_replaces(self):
        descriptor = RequestDescriptor(
            method="GET", path="/x", query_params=[("hapikey", "k"), ("offset", "0"), ("count", "5")]
        )
        merged = descriptor.merged_query({"offset": "20"})
        assert merged == [("hapikey", "k"), ("count", "5"), ("offset", "20")]

    def test_merged_query_without_override(self):
        descriptor = RequestDescriptor(method="GET", path="/x", query_params=[("a", "1")])
        assert descriptor.merged_query() == [("a", "1")]

    def test_is_paginated(self):
        assert not RequestDescriptor(method="GET", path="/x").is_paginated
        paged = RequestDescriptor(method="GET", path="/x", pagination=OffsetField("o", "r"))
        assert paged.is_paginated


class TestBuildBaseRequest:
    """Test build_base_request credential injection."""

    def test_credential_injected_first(self):
        descriptor = build_base_request(
            "GET", "/contacts", query_params={"count": "10"}, credential="secret"
        )
        assert descriptor.query_params == (("hapikey", "secret"), ("count", "10"))

    def test_custom_credential_param(self):
        descriptor = build_base_request(
            "GET", "/contacts", credential="secret", credential_param="api_key"
        )
        assert descriptor.query_params == (("api_key", "secret"),)

    def test_missing_credential(self):
        with pytest.raises(ConfigurationError, match="no API key present"):
            build_base_request("GET", "/contacts", credential="")

    def test_string_body_encoded(self):
        descriptor = build_base_request("POST", "/c", body='{"a": 1}', credential="k")
        assert descriptor.body == b'{"a": 1}'

    def test_empty_body_is_none(self):
        assert build_base_request("POST", "/c", body="", credential="k").body is None

    def test_headers_order_preserved(self):
        descriptor = build_base_request(
            "GET",
            "/c",
            headers=[("Content-Type", "application/json"), ("X-Trace", "1")],
            credential="k",
        )
        assert descriptor.headers == (("Content-Type", "application/json"), ("X-Trace", "1"))


class TestRequestBuilder:
    """Test the fluent RequestBuilder."""

    def test_build_with_offset_pagination(self):
        descriptor = (
            RequestBuilder("GET", "/contacts/v1/lists/all/contacts/all")
            .param("count", "100")
            .header("Accept", "application/json")
            .offset_field("vidOffset", "vid-offset")
            .build(credential="demo")
        )
        assert descriptor.method is HttpMethod.GET
        assert descriptor.query_params == (("hapikey", "demo"), ("count", "100"))
        assert descriptor.headers == (("Accept", "application/json"),)
        assert descriptor.pagination == OffsetField("vidOffset", "vid-offset")

    def test_build_with_limit_pagination(self):
        descriptor = (
            RequestBuilder("GET", "/deals")
            .limit_as_offset("offset", "limit", 250, "total", strict_total=True)
            .success_status(200)
            .build(credential="demo")
        )
        assert descriptor.pagination == LimitAsOffset("offset", "limit", "250", "total", True)

    def test_lists(self):
        descriptor = (
            RequestBuilder("POST", "/c")
            .headers_from_lists(["A", "B"], ["1", "2"])
            .params_from_lists(["x"], ["y"])
            .body(b"{}")
            .success_status(204)
            .build(credential="demo")
        )
        assert descriptor.headers == (("A", "1"), ("B", "2"))
        assert descriptor.query_params == (("hapikey", "demo"), ("x", "y"))
        assert descriptor.body == b"{}"
        assert descriptor.success_status == 204

    def test_header_list_length_mismatch(self):
        with pytest.raises(ConfigurationError, match="header name/value array lengths do not match"):
            RequestBuilder("GET", "/c").headers_from_lists(["A", "B"], ["1"])

    def test_param_list_length_mismatch(self):
        with pytest.raises(ConfigurationError, match="parameter name/value array lengths"):
            RequestBuilder("GET", "/c").params_from_lists(["a"], [])
