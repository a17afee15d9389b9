"""Tests for the JSON-file-backed configuration loaders."""

import json

import pytest

from storekit.domain.exceptions import ConfigurationError
from storekit.domain.model.coupon import Coupon
from storekit.infrastructure.persistence.json_coupon_catalog import JsonCouponCatalog
from storekit.infrastructure.persistence.json_driving_age_table import (
    JsonDrivingAgeTable,
)


class TestJsonCouponCatalog:

    def test_loads_coupons(self, tmp_path):
        path = tmp_path / "coupons.json"
        path.write_text(json.dumps([{"code": "HALF", "discount": 0.5}]))

        catalog = JsonCouponCatalog(path).load()

        assert catalog.to_list() == [Coupon("HALF", 0.5)]

    def test_missing_file_uses_builtin_coupons(self, tmp_path):
        catalog = JsonCouponCatalog(tmp_path / "nope.json").load()
        assert {c.code for c in catalog} == {"SAVE10", "SAVE20"}

    def test_malformed_json_rejected(self, tmp_path):
        path = tmp_path / "coupons.json"
        path.write_text("[{")
        with pytest.raises(ConfigurationError, match="Malformed coupon file"):
            JsonCouponCatalog(path).load()

    def test_non_list_rejected(self, tmp_path):
        path = tmp_path / "coupons.json"
        path.write_text(json.dumps({"code": "HALF"}))
        with pytest.raises(ConfigurationError, match="must contain a list"):
            JsonCouponCatalog(path).load()

    def test_missing_field_rejected(self, tmp_path):
        path = tmp_path / "coupons.json"
        path.write_text(json.dumps([{"code": "HALF"}]))
        with pytest.raises(ConfigurationError, match="need 'code' and 'discount'"):
            JsonCouponCatalog(path).load()

    def test_invalid_discount_rejected(self, tmp_path):
        path = tmp_path / "coupons.json"
        path.write_text(json.dumps([{"code": "ALL", "discount": 1.0}]))
        with pytest.raises(ConfigurationError, match="between 0 and 1"):
            JsonCouponCatalog(path).load()

    def test_duplicate_codes_rejected(self, tmp_path):
        path = tmp_path / "coupons.json"
        path.write_text(
            json.dumps([{"code": "A", "discount": 0.1}, {"code": "A", "discount": 0.2}])
        )
        with pytest.raises(ConfigurationError, match="Duplicate"):
            JsonCouponCatalog(path).load()


class TestJsonDrivingAgeTable:

    def test_loads_table(self, tmp_path):
        path = tmp_path / "driving_ages.json"
        path.write_text(json.dumps({"US": 16, "DE": 18}))
        assert JsonDrivingAgeTable(path).load() == {"US": 16, "DE": 18}

    def test_missing_file_uses_builtin_table(self, tmp_path):
        table = JsonDrivingAgeTable(tmp_path / "nope.json").load()
        assert table == {"US": 16, "UK": 17}

    def test_non_object_rejected(self, tmp_path):
        path = tmp_path / "driving_ages.json"
        path.write_text(json.dumps([16, 17]))
        with pytest.raises(ConfigurationError, match="must contain an object"):
            JsonDrivingAgeTable(path).load()

    @pytest.mark.parametrize("age", ["16", 0, -1, True, 16.5])
    def test_bad_age_rejected(self, tmp_path, age):
        path = tmp_path / "driving_ages.json"
        path.write_text(json.dumps({"US": age}))
        with pytest.raises(ConfigurationError, match="positive integer"):
            JsonDrivingAgeTable(path).load()
