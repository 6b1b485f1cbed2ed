# app.py
import json, logging
from typing import Optional

from flask import Flask, request

from graph_client import enforce_thread_name
from lock_config import Settings, load_settings
from rename_detection import iter_rename_signals

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
log = logging.getLogger("thread-lock")

PLAIN = {"Content-Type": "text/plain; charset=utf-8"}


def create_app(settings: Optional[Settings] = None) -> Flask:
    settings = settings or load_settings()
    app = Flask(__name__)
    app.config["THREAD_LOCK_SETTINGS"] = settings
    log.setLevel(settings.log_level)

    @app.get("/")
    def health():
        return "OK", 200, PLAIN

    # Webhook verification (handshake)
    @app.get("/webhook")
    def verify():
        mode = request.args.get("hub.mode")
        token = request.args.get("hub.verify_token")
        challenge = request.args.get("hub.challenge", "")
        if mode and token:
            if mode == "subscribe" and settings.verify_token and token == settings.verify_token:
                log.info("WEBHOOK_VERIFIED")
                return challenge, 200, PLAIN
            return "", 403
        return "", 400

    @app.post("/webhook")
    def receive():
        body = request.get_json(force=True, silent=True)
        if not body:
            return "", 400

        try:
            log.info("Received webhook body: %s", json.dumps(body)[:1000])
            for signal in iter_rename_signals(body):
                if signal.thread_id is None:
                    log.warning("Rename event detected but could not find thread id in event: %s",
                                json.dumps(signal.event))
                    continue
                log.info("Detected rename in thread %s, enforcing locked name.", signal.thread_id)
                result = enforce_thread_name(signal.thread_id, settings.locked_name, settings)
                if not result.ok:
                    # failures stop here; the webhook is always acked
                    log.debug("Enforcement skipped for %s: %s", signal.thread_id, result.reason)
        except Exception:
            log.exception("Error handling webhook")
            return "", 500

        return "OK", 200, PLAIN

    return app


def main():
    settings = load_settings()
    app = create_app(settings)
    if not settings.verify_token:
        log.warning("VERIFY_TOKEN is not set; webhook verification will always fail.")
    log.info("Webhook server listening on port %s", settings.port)
    app.run(host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
