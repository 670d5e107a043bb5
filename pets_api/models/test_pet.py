# pets_api/models/test_pet.py
from pets_api.models.pet import Pet

def test_from_dict_maps_id():
    pet = Pet.from_dict({'_id': 'abc123', 'type': 'dog', 'name': 'Alexander'})
    assert pet == Pet(pet_id='abc123', type='dog', name='Alexander')

def test_from_dict_tolerates_missing_fields():
    """필수 필드가 없는 기존 문서도 읽을 수 있어야 함"""
    pet = Pet.from_dict({'_id': 'abc123'})
    assert pet.type is None
    assert pet.name is None

