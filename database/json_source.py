"""
JSON 파일 전문가 통계 소스

파일 형식:
    {"experts": [{"expertId": "1", "name": "...", "specialty": "...",
                  "totalSessions": 120, "avgRating": 4.8, ...}, ...]}
"""
import json
from pathlib import Path
from typing import Dict, List, Optional, Union

from loguru import logger

from ranking import ExpertRecord, ExpertStats, StatsUnavailableError


class JsonStatsSource:
    """JSON 파일 기반 통계 소스 (파일 변경 시 다시 읽음)"""

    kind = "json"

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._records: Dict[str, ExpertRecord] = {}
        self._mtime: Optional[float] = None

    def _load(self) -> Dict[str, ExpertRecord]:
        try:
            mtime = self.path.stat().st_mtime
        except OSError as e:
            raise StatsUnavailableError(f"통계 파일 없음: {self.path}") from e

        if self._mtime == mtime:
            return self._records

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"통계 파일 로드 오류: {e}")
            raise StatsUnavailableError(str(e)) from e

        if not isinstance(data, dict):
            raise StatsUnavailableError(f"잘못된 통계 파일 형식: {self.path}")

        experts = data.get("experts", [])
        if not isinstance(experts, list):
            raise StatsUnavailableError(f"experts 항목이 목록이 아님: {self.path}")

        records = {}
        for item in experts:
            if not isinstance(item, dict):
                logger.warning(f"잘못된 전문가 항목 무시: {item!r}")
                continue
            expert_id = str(item.get("expertId", "")).strip()
            if not expert_id:
                continue
            records[expert_id] = ExpertRecord(
                expert_id=expert_id,
                stats=ExpertStats.from_dict(item),
                name=item.get("name"),
            )

        self._records = records
        self._mtime = mtime
        logger.info(f"전문가 통계 로드 완료: {len(records)}명 ({self.path})")
        return records

    def fetch_all(self) -> List[ExpertRecord]:
        return list(self._load().values())

    def get(self, expert_id: str) -> Optional[ExpertRecord]:
        return self._load().get(str(expert_id))

    def get_name(self, expert_id: str) -> Optional[str]:
        record = self.get(expert_id)
        return record.name if record else None
