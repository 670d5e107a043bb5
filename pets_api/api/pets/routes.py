# pets_api/api/pets/routes.py
import logging
from flask import Blueprint, request, jsonify, current_app

from pets_api.core.exceptions import PetNotFoundError, DocumentStoreError
from .schemas import PetSchema, PetUpdateSchema

logger = logging.getLogger(__name__)

pets_bp = Blueprint('pets_bp', __name__)

def _store_fault(err: DocumentStoreError):
    """저장소 오류 메시지를 그대로 본문에 담아 500으로 응답합니다."""
    return str(err), 500, {'Content-Type': 'text/plain; charset=utf-8'}

@pets_bp.route('', methods=['GET'])
def list_pets():
    """모든 반려동물 목록을 조회합니다.
    ---
    get:
      summary: Returns the list of all pets
      tags: [Pets]
      responses:
        200:
          description: Success to get the pets
          content:
            application/json:
              schema:
                type: array
                items:
                  $ref: "#/components/schemas/Pet"
        500:
          description: Internal server error while processing request
    """
    pet_service = current_app.services['pets']
    try:
        pets = pet_service.list_pets()
        return jsonify(PetSchema(many=True).dump(pets)), 200
    except DocumentStoreError as e:
        logger.error(f"List pets API error: {e}", exc_info=True)
        return _store_fault(e)

@pets_bp.route('/<string:id>', methods=['GET'])
def get_pet(id: str):
    """
    특정 반려동물을 조회합니다.
    ---
    get:
      summary: Get a pet by id
      tags: [Pets]
      parameters:
        - in: path
          name: id
          schema:
            type: string
          required: true
          description: The pet's id
      responses:
        200:
          description: Success to get the pet
          content:
            application/json:
              schema:
                $ref: "#/components/schemas/Pet"
        404:
          description: The pet was not found
        500:
          description: Internal server error while processing request
    """
    pet_service = current_app.services['pets']
    try:
        pet = pet_service.get_pet(id)
        return jsonify(PetSchema().dump(pet)), 200
    except PetNotFoundError:
        return '', 404
    except DocumentStoreError as e:
        logger.error(f"Get pet API error (id: {id}): {e}", exc_info=True)
        return _store_fault(e)

@pets_bp.route('', methods=['POST'])
def create_pet():
    """
    새 반려동물 레코드를 생성합니다. 검증 실패(ValidationError)는 앱 전역 핸들러가 400으로 처리합니다.
    ---
    post:
      summary: Create new record of pet
      tags: [Pets]
      requestBody:
        required: true
        content:
          application/json:
            schema:
              $ref: "#/components/schemas/Pet"
      responses:
        201:
          description: Success to create new record of pet
          content:
            application/json:
              schema:
                $ref: "#/components/schemas/Pet"
        400:
          description: The request body is not a valid pet
          content:
            application/json:
              schema:
                $ref: "#/components/schemas/ErrorResponse"
        500:
          description: Internal server error while processing request
    """
    pet_service = current_app.services['pets']
    validated_data = PetSchema().load(request.get_json(silent=True))
    try:
        new_pet = pet_service.create_pet(validated_data)
        return jsonify(PetSchema().dump(new_pet)), 201
    except DocumentStoreError as e:
        logger.error(f"Pet creation API error: {e}", exc_info=True)
        return _store_fault(e)

@pets_bp.route('/<string:id>', methods=['PUT'])
def update_pet(id: str):
    """
    반려동물 정보를 부분 업데이트합니다.
    ---
    put:
      summary: Update a pet by the id
      tags: [Pets]
      parameters:
        - in: path
          name: id
          schema:
            type: string
          required: true
          description: The pet's id
      requestBody:
        required: true
        content:
          application/json:
            schema:
              $ref: "#/components/schemas/PetUpdate"
      responses:
        200:
          description: Successfully update a pet
          content:
            application/json:
              schema:
                $ref: "#/components/schemas/Pet"
        400:
          description: The request body is not a valid pet update
          content:
            application/json:
              schema:
                $ref: "#/components/schemas/ErrorResponse"
        404:
          description: The pet was not found
        500:
          description: Internal server error while processing request
    """
    pet_service = current_app.services['pets']
    update_data = PetUpdateSchema().load(request.get_json(silent=True))
    try:
        updated_pet = pet_service.update_pet(id, update_data)
        return jsonify(PetSchema().dump(updated_pet)), 200
    except PetNotFoundError:
        return '', 404
    except DocumentStoreError as e:
        logger.error(f"Update pet API error (id: {id}): {e}", exc_info=True)
        return _store_fault(e)

@pets_bp.route('/<string:id>', methods=['DELETE'])
def delete_pet(id: str):
    """
    반려동물 레코드를 삭제합니다.
    ---
    delete:
      summary: Remove a pet record by id
      tags: [Pets]
      parameters:
        - in: path
          name: id
          schema:
            type: string
          required: true
          description: The pet's id
      responses:
        200:
          description: The pet was deleted
        404:
          description: The pet was not found
        500:
          description: Internal server error while processing request
    """
    pet_service = current_app.services['pets']
    try:
        pet_service.delete_pet(id)
        return '', 200
    except PetNotFoundError:
        return '', 404
    except DocumentStoreError as e:
        logger.error(f"Delete pet API error (id: {id}): {e}", exc_info=True)
        return _store_fault(e)
