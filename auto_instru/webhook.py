"""
Mutating Admission Webhook: inject APM tracers into pods that ask for one.

Behavior:
- Target resources: Pod objects carrying a tracer annotation or label, e.g.
  `admission.datadoghq.com/java-tracer.version=1.2.3` or
  `admission.datadoghq.com/java-tracer.custom-image=<image>`.
- Mutation: adds the tracer init container and a shared emptyDir volume, mounts
  it in every container and extends the runtime options variable
  (JAVA_TOOL_OPTIONS for Java).

Implementation details:
- Receives AdmissionReview (v1) requests at /mutate (HTTPS).
- The pod is mutated on a deep copy and diffed against the original with
  jsonpatch; the RFC 6902 patch is base64-encoded in the AdmissionReview
  response. If nothing changed, returns Allowed=true with no patch.
- Instrumentation errors admit the pod unmodified and report the error in
  response.status.message. Other errors fail-open too; use the webhook
  failurePolicy to control cluster behavior.

Configuration: see auto_instru.config.
"""

import base64
import copy
import json
import logging
from typing import Any, Dict

import jsonpatch
from flask import Flask, jsonify, request

from auto_instru import config
from auto_instru.errors import InstrumentationError, LanguageNotImplementedError
from auto_instru.mutate import inject_auto_instru
from auto_instru.pods import pod_string

app = Flask(__name__)
logging.basicConfig(level=getattr(logging, config.LOG_LEVEL, logging.INFO))

# Static envelope fields needed in AdmissionReview responses
BLANK_ADMISSIONREVIEW = {"apiVersion": "admission.k8s.io/v1", "kind": "AdmissionReview"}


def build_patch(pod: Dict[str, Any], namespace: str) -> jsonpatch.JsonPatch:
    """Instrument a copy of `pod` and return the JSON Patch from `pod` to the copy.

    Raises InstrumentationError when the pod cannot be instrumented; `pod`
    itself is never modified.
    """
    mutated = inject_auto_instru(copy.deepcopy(pod), namespace, config.CONTAINER_REGISTRY)
    return jsonpatch.JsonPatch.from_diff(pod, mutated)


@app.route("/mutate", methods=["POST"])
def mutate():
    """Admission endpoint that returns a JSON Patch for pods requesting a tracer.

    Request: AdmissionReview v1 with `request.object` containing the pod.
    Response: AdmissionReview v1 with `response.allowed=true` and optional
              base64-encoded `response.patch` (patchType=JSONPatch).
    """
    uid = None
    try:
        body = request.get_json(force=True, silent=False)
        if not isinstance(body, dict):
            raise ValueError("Invalid AdmissionReview payload")

        req = body.get("request") or {}
        uid = req.get("uid")
        kind = (req.get("kind") or {}).get("kind")
        namespace = req.get("namespace") or ""
        obj = req.get("object")

        response: Dict[str, Any] = {"uid": uid, "allowed": True}

        if kind != "Pod" or not config.AUTO_INSTRU_ENABLED:
            return jsonify({**BLANK_ADMISSIONREVIEW, "response": response})

        try:
            patch = build_patch(obj, namespace)
        except LanguageNotImplementedError as exc:
            app.logger.warning("skipping instrumentation uid=%s ns=%s: %s", uid, namespace, exc)
            response["status"] = {"message": str(exc)}
            return jsonify({**BLANK_ADMISSIONREVIEW, "response": response})
        except InstrumentationError as exc:
            app.logger.error("instrumentation failed uid=%s ns=%s: %s", uid, namespace, exc)
            response["status"] = {"message": str(exc)}
            return jsonify({**BLANK_ADMISSIONREVIEW, "response": response})

        ops = patch.patch
        if ops:
            response["patch"] = base64.b64encode(json.dumps(ops).encode("utf-8")).decode("utf-8")
            response["patchType"] = "JSONPatch"
            app.logger.info(
                "mutation uid=%s ns=%s pod=%s patches=%d",
                uid,
                namespace,
                pod_string(obj),
                len(ops),
            )

        return jsonify({**BLANK_ADMISSIONREVIEW, "response": response})

    except Exception as exc:  # noqa: BLE001
        app.logger.exception("mutation failed: %s", exc)
        return jsonify({**BLANK_ADMISSIONREVIEW, "response": {"uid": uid, "allowed": True}})


@app.route("/healthz", methods=["GET"])  # liveness/readiness
def healthz():
    """Simple liveness/readiness probe endpoint."""
    return "ok", 200


def main() -> None:
    """Run the Flask app with TLS using cert/key provided via env or defaults."""
    app.logger.info(
        "Starting webhook on port %s (registry %s, enabled %s)",
        config.PORT,
        config.CONTAINER_REGISTRY,
        config.AUTO_INSTRU_ENABLED,
    )
    app.run(host="0.0.0.0", port=config.PORT, ssl_context=(config.CERT_FILE, config.KEY_FILE))


if __name__ == "__main__":
    main()
