"""インメモリ厩舎リポジトリ実装."""
import copy
import logging

from studbook.domain.entities import Stable
from studbook.domain.ports.gender_maturity_mapping import GenderMaturityMapping
from studbook.domain.ports.stable_repository import StableRepository

logger = logging.getLogger(__name__)


class InMemoryStableRepository(StableRepository):
    """インメモリ厩舎リポジトリ.

    保存時に辞書へ変換して保持するため、読み込みは毎回復元処理を通る。
    """

    def __init__(self, gender_maturity: GenderMaturityMapping) -> None:
        """初期化."""
        self._gender_maturity = gender_maturity
        self._stables: dict[str, dict] = {}

    def save(self, slot: str, stable: Stable) -> None:
        """厩舎を保存する."""
        self._stables[slot] = copy.deepcopy(stable.to_dict())
        logger.debug("Saved stable to slot %s (%s horses)", slot, stable.get_total_horses())

    def find_by_slot(self, slot: str) -> Stable | None:
        """セーブスロットで検索する."""
        data = self._stables.get(slot)
        if data is None:
            return None
        return Stable.from_dict(copy.deepcopy(data), self._gender_maturity)

    def delete(self, slot: str) -> None:
        """厩舎を削除する."""
        self._stables.pop(slot, None)
