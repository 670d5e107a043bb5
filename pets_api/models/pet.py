# pets_api/models/pet.py
from dataclasses import dataclass
from typing import Optional, Dict, Any

@dataclass
class Pet:
    """
    TinyDB 'pets' 테이블의 문서 구조.
    저장소 문서의 `_id`는 파이썬 쪽에서 `pet_id`로 다룹니다.
    """
    pet_id: str
    type: Optional[str] = None
    name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Pet":
        """저장소에서 읽은 문서로부터 Pet 인스턴스를 생성합니다."""
        return cls(
            pet_id=data['_id'],
            type=data.get('type'),
            name=data.get('name'),
        )

