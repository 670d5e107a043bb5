# pets_api/api/pets/services.py
import logging
from typing import Dict, Any, List

from pets_api.core.exceptions import PetNotFoundError
from pets_api.models.pet import Pet
from pets_api.services.document_store import DocumentStore

logger = logging.getLogger(__name__)

class PetService:
    """반려동물 레코드의 생성/조회/수정/삭제를 전담하는 서비스."""

    def __init__(self, store: DocumentStore):
        self.store = store
        logger.info("PetService initialized with document store.")

    def list_pets(self) -> List[Pet]:
        """모든 반려동물을 저장된 순서대로 반환합니다."""
        return [Pet.from_dict(doc) for doc in self.store.find({})]

    def get_pet(self, pet_id: str) -> Pet:
        doc = self.store.find_one({'_id': pet_id})
        if doc is None:
            raise PetNotFoundError(pet_id)
        return Pet.from_dict(doc)

    def create_pet(self, pet_data: Dict[str, Any]) -> Pet:
        """검증된 데이터로 새 레코드를 저장합니다. `_id`는 저장소가 부여합니다."""
        inserted = self.store.insert(dict(pet_data))
        logger.info(f"Pet created: {inserted['_id']}")
        return Pet.from_dict(inserted)

    def update_pet(self, pet_id: str, update_data: Dict[str, Any]) -> Pet:
        """
        전달된 필드만 병합하여 갱신합니다. 전달되지 않은 필드는 유지됩니다.
        일치 여부 확인과 갱신은 저장소의 단일 원자 연산으로 처리됩니다.
        """
        updated = self.store.update({'_id': pet_id}, update_data)
        if not updated:
            raise PetNotFoundError(pet_id)
        logger.info(f"Pet updated: {pet_id} with fields: {list(update_data.keys())}")
        return Pet.from_dict(updated[0])

    def delete_pet(self, pet_id: str) -> None:
        removed = self.store.remove({'_id': pet_id})
        if not removed:
            raise PetNotFoundError(pet_id)
        logger.info(f"Pet deleted: {pet_id}")
