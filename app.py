import logging
from datetime import datetime, timezone

from dotenv import load_dotenv

from flask import Flask, request, jsonify
from openai import OpenAI
from sqlalchemy.exc import SQLAlchemyError

load_dotenv()

from constants import LLM_API_KEY, LLM_BASE_URL, PORT
from prompt_enhancer.db import get_default_adapter
from prompt_enhancer.errors import (
    CompletionError,
    GuideNotFoundError,
    MissingPlatformError,
    MissingPromptError,
)
from prompt_enhancer.services import EnhanceService, GuideService

app = Flask(__name__)
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)
db_adapter = get_default_adapter()
db_adapter.create_tables()


@app.route("/")
def health_check() -> tuple:
    logger.debug("Health check request received.")
    return jsonify({
        "status": "success",
        "message": "Prompt Enhancer server is running!",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }), 200


@app.route("/api/enhance", methods=["POST"])
def enhance_prompt() -> tuple:
    """
    Rewrite a prompt using the stored guide for a platform.

    Body (JSON or form): { "platform": "gemini", "prompt": "..." }
    """
    platform, prompt = _read_enhance_body()
    try:
        result = EnhanceService.enhance(platform, prompt)
        return jsonify({"enhanced_prompt": result["enhanced_prompt"]}), 200
    except (MissingPlatformError, MissingPromptError) as e:
        logger.info("enhance validation failed: %s", e)
        return jsonify({"error": str(e)}), 400
    except GuideNotFoundError:
        return jsonify({"error": "Guide not found for the specified platform"}), 404
    except CompletionError as e:
        logger.error("AI model error: %s", e.details)
        return jsonify({"error": "AI model request failed", "details": e.details}), 500
    except SQLAlchemyError:
        logger.exception("Guide query failed.")
        return jsonify({"error": "Database query failed"}), 500
    except Exception:
        logger.exception("Error in /api/enhance endpoint.")
        return jsonify({"error": "Internal server error"}), 500


@app.route("/api/instruction", methods=["POST"])
def preview_instruction() -> tuple:
    """Return the meta-prompt that /api/enhance would send, without calling the model."""
    platform, prompt = _read_enhance_body()
    try:
        preview = EnhanceService.preview_instruction(platform, prompt)
        return jsonify(preview), 200
    except (MissingPlatformError, MissingPromptError) as e:
        logger.info("instruction validation failed: %s", e)
        return jsonify({"error": str(e)}), 400
    except GuideNotFoundError:
        return jsonify({"error": "Guide not found for the specified platform"}), 404
    except SQLAlchemyError:
        logger.exception("Guide query failed.")
        return jsonify({"error": "Database query failed"}), 500
    except Exception:
        logger.exception("Error in /api/instruction endpoint.")
        return jsonify({"error": "Internal server error"}), 500


@app.route("/api/guides", methods=["GET"])
def list_guides() -> tuple:
    try:
        guides = GuideService.list_platforms()
        logger.debug("Returning %d guides", len(guides))
        return jsonify({"guides": guides, "total": len(guides)}), 200
    except Exception as e:
        logger.exception("list guides failed.")
        return jsonify({"error": str(e)}), 500


@app.route("/openai/health", methods=["GET"])
def openai_health() -> tuple:
    """Validate OpenAI SDK configuration."""
    try:
        client = OpenAI(base_url=LLM_BASE_URL, api_key=LLM_API_KEY)
        models = client.models.list()
        model_count = len(list(models))
        logger.info("OpenAI health ok. Models=%d", model_count)
        return jsonify({"status": "ok", "models": model_count}), 200
    except Exception as e:
        logger.exception("OpenAI health failed.")
        return jsonify({"status": "error", "error": str(e)}), 500


def _read_enhance_body() -> tuple[object, object]:
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        body = request.form
    return body.get("platform"), body.get("prompt")


if __name__ == "__main__":
    logger.info("Prompt Enhancer server starting on port %d", PORT)
    app.run(port=PORT, debug=True)
