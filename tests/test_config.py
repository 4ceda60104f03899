from decimal import Decimal

import pytest
from pydantic import ValidationError

from debtcalc.config import Settings


class TestSettings:
    def test_defaults(self):
        cfg = Settings()
        convention = cfg.day_count_convention()
        assert convention.days_in_year == Decimal("360")
        assert convention.days_in_month == Decimal("30")

    @pytest.mark.parametrize("field", ["days_in_year", "days_in_month", "decimal_precision"])
    @pytest.mark.parametrize("bad", [0, -1])
    def test_rejects_non_positive(self, field, bad):
        with pytest.raises(ValidationError):
            Settings(**{field: bad})

    def test_rejects_bad_environment(self, monkeypatch):
        monkeypatch.setenv("DEBTCALC_DAYS_IN_MONTH", "0")
        with pytest.raises(ValidationError):
            Settings()
