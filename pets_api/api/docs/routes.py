# pets_api/api/docs/routes.py
from flask import Blueprint, jsonify, current_app, render_template_string, url_for

docs_bp = Blueprint('docs_bp', __name__)

SWAGGER_UI_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>{{ title }}</title>
  <link rel="stylesheet" href="{{ cdn }}/swagger-ui.css">
</head>
<body>
  <div id="swagger-ui"></div>
  <script src="{{ cdn }}/swagger-ui-bundle.js"></script>
  <script>
    window.onload = function () {
      window.ui = SwaggerUIBundle({ url: "{{ spec_url }}", dom_id: "#swagger-ui" });
    };
  </script>
</body>
</html>
"""

@docs_bp.route('', methods=['GET'])
def swagger_ui():
    """OpenAPI 문서를 탐색할 수 있는 Swagger UI 페이지."""
    return render_template_string(
        SWAGGER_UI_PAGE,
        title=current_app.config['API_TITLE'],
        cdn=current_app.config['SWAGGER_UI_CDN'],
        spec_url=url_for('docs_bp.openapi_json'),
    )

@docs_bp.route('/openapi.json', methods=['GET'])
def openapi_json():
    return jsonify(current_app.extensions['openapi'])
