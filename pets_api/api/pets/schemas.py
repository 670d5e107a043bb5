# pets_api/api/pets/schemas.py
from marshmallow import Schema, fields, validate

class PetSchema(Schema):
    """POST /pets 요청 및 모든 Pet 응답에 쓰이는 스키마. `_id`는 응답에만 포함됩니다."""
    pet_id = fields.Str(
        data_key='_id', dump_only=True,
        metadata={"description": "The auto-generated id of the pet"}
    )
    type = fields.Str(
        required=True, validate=validate.Length(min=1),
        metadata={"description": "The pet type"}
    )
    name = fields.Str(
        required=True, validate=validate.Length(min=1),
        metadata={"description": "The pet name"}
    )

class PetUpdateSchema(Schema):
    """PUT /pets/<pet_id> 부분 업데이트용 스키마. 전달된 필드만 덮어씁니다."""
    type = fields.Str(validate=validate.Length(min=1))
    name = fields.Str(validate=validate.Length(min=1))

class ErrorResponseSchema(Schema):
    """
    에러 응답을 위한 스키마
    """
    error_code = fields.Str(required=True)
    message = fields.Str()
    details = fields.Raw()
