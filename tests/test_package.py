"""
Tests for the top-level package exports.
"""

import pytest

import isospline


class TestLazyExports:

    @pytest.mark.parametrize("name", [n for n in isospline.__all__ if n != "__version__"])
    def test_export_resolves(self, name):
        assert getattr(isospline, name) is not None

    def test_version(self):
        assert isospline.__version__ == "1.0.0"

    def test_unknown_attribute(self):
        with pytest.raises(AttributeError):
            isospline.does_not_exist

    def test_end_to_end(self):
        result = isospline.design_spline(module=2.5, num_teeth=20, root_type="fillet")
        profile = isospline.generate_profile(result, points_per_curve=150)

        assert isospline.validate_spline(result).valid
        assert len(profile.external.full_profile) == 2 * 151
