"""Unit tests for the photographic option enumerations."""

import pytest

from snapstudio.core.options import (
    SOCIAL_PLATFORM_ASPECT_RATIOS,
    AspectRatio,
    CameraAngle,
    Resolution,
    SocialPlatform,
    aspect_ratio_code,
    aspect_ratio_for_platform,
)


class TestLabels:
    """Option values are the UI labels."""

    def test_lookup_by_label(self):
        """Members are found by their label."""
        assert CameraAngle("مستوى العين (طبيعي)") is CameraAngle.EYE_LEVEL

    def test_value_interpolation(self):
        """The .value of a member is the raw label."""
        assert f"{Resolution.UHD.value}" == "دقة سينمائية (4K)"


class TestSocialPresets:
    """Tests for social platform aspect ratio presets."""

    def test_every_platform_mapped(self):
        """Each platform has an aspect ratio."""
        assert set(SOCIAL_PLATFORM_ASPECT_RATIOS) == set(SocialPlatform)

    @pytest.mark.parametrize(
        "platform,expected",
        [
            ("Instagram Post", AspectRatio.SQUARE),
            ("Instagram Portrait", AspectRatio.PORTRAIT),
            ("Story / TikTok", AspectRatio.STORY),
            ("YouTube Thumbnail", AspectRatio.LANDSCAPE),
            ("Facebook Cover", AspectRatio.LANDSCAPE),
            ("Twitter / X Post", AspectRatio.LANDSCAPE),
        ],
    )
    def test_platform_ratio(self, platform: str, expected: AspectRatio):
        """Platform labels map to the expected ratio."""
        assert aspect_ratio_for_platform(platform) is expected

    def test_unknown_platform(self):
        """Unknown platforms raise ValueError."""
        with pytest.raises(ValueError):
            aspect_ratio_for_platform("MySpace")


class TestAspectRatioCode:
    """Tests for aspect_ratio_code."""

    def test_code_from_member(self):
        """The leading ratio code is returned."""
        assert aspect_ratio_code(AspectRatio.LANDSCAPE) == "16:9"

    def test_code_from_label(self):
        """Labels are accepted too."""
        assert aspect_ratio_code("4:5 (بورتريه)") == "4:5"
