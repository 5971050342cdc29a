"""カスタマイズの値オブジェクトのテスト."""
import pytest

from studbook.domain.enums import DistancePreference, RacingStrategy, TrackType
from studbook.domain.value_objects import Customization


class TestCustomization:
    """Customizationのテスト."""

    def test_辞書から生成できる(self):
        customization = Customization.from_dict({"track_type": "turf", "distance": "sprint"})
        assert customization.track_type == TrackType.TURF
        assert customization.distance == DistancePreference.SPRINT
        assert customization.strategy is None

    def test_未知のキーはエラー(self):
        with pytest.raises(ValueError, match="color"):
            Customization.from_dict({"color": "red"})

    def test_未知の値はエラー(self):
        with pytest.raises(ValueError):
            Customization.from_dict({"distance": "marathon"})

    def test_辞書以外は型エラー(self):
        with pytest.raises(TypeError):
            Customization.coerce("turf")

    def test_選択内容の要約(self):
        customization = Customization(TrackType.TURF, DistancePreference.SPRINT, RacingStrategy.FRONT)
        assert customization.describe() == "Customized for turf track, sprint distance, front running"
        assert Customization().describe() == "None"

    def test_何も選ばなければ空(self):
        assert Customization().is_empty
        assert not Customization(strategy=RacingStrategy.LATE).is_empty
