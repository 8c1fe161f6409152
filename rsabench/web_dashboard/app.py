# app.py
from flask import Flask, request, jsonify

from rsabench.batch.messages import generate_messages
from rsabench.batch.processor import EXECUTORS, compare
from rsabench.config import (
    DEFAULT_EXECUTOR,
    DEFAULT_MESSAGE_COUNT,
    DEFAULT_MODULUS_BITS,
    DEFAULT_WORKERS,
    LAB_MAX_BITS,
    LAB_MAX_MESSAGES,
    LAB_MAX_WORKERS,
    LAB_MIN_BITS,
)
from rsabench.rsa.keygen import try_generate_key_pair
from rsabench.rsa.pem import build_public_pem
from rsabench.rsa.randomness import RandomSource

app = Flask(__name__)


class BadParameter(ValueError):
    pass


def _params():
    if request.method == "GET":
        return request.args
    data = request.get_json(silent=True)
    if data is None:
        return request.form
    if not isinstance(data, dict):
        raise BadParameter("JSON body must be an object")
    return data


def _int_param(params, name, default=None, lo=None, hi=None):
    raw = params.get(name)
    if raw is None or str(raw).strip() == "":
        if default is None:
            return None
        value = default
    else:
        try:
            value = int(str(raw).strip(), 0)  # allow hex like 0x...
        except ValueError:
            raise BadParameter(f"{name} must be an integer") from None
    if lo is not None and value < lo:
        raise BadParameter(f"{name} must be >= {lo}")
    if hi is not None and value > hi:
        raise BadParameter(f"{name} must be <= {hi}")
    return value


def _error(msg, code):
    return jsonify({"status": "error", "message": msg}), code


def _key_json(key_pair):
    pub = key_pair.public
    return {
        "e": str(pub.e),
        "n": str(pub.n),
        "modulus_bits": key_pair.modulus_bits,
        "public_key_pem": build_public_pem(pub).decode(),
    }


def _generate(params):
    bits = _int_param(params, "bits", DEFAULT_MODULUS_BITS, LAB_MIN_BITS, LAB_MAX_BITS)
    seed = _int_param(params, "seed")
    rng = RandomSource(seed)
    return try_generate_key_pair(modulus_bits=bits, rng=rng), rng


# -----------------------
# Routes
# -----------------------
@app.route("/")
def index():
    return jsonify({
        "status": "ok",
        "routes": {
            "GET /generate_key": "bits, seed",
            "POST /run_batch": "bits, count, workers, seed, executor",
        },
        "limits": {
            "bits": [LAB_MIN_BITS, LAB_MAX_BITS],
            "count": LAB_MAX_MESSAGES,
            "workers": LAB_MAX_WORKERS,
        },
    })


@app.route("/generate_key", methods=["GET"])
def generate_key():
    """
    Return a fresh public key (decimal strings + PEM). The private half
    never leaves the server.
    Query params:
      bits=<int>  (default from config; lab limits apply)
      seed=<int>  (optional, reproducible keys)
    """
    try:
        res, _ = _generate(request.args)
    except BadParameter as ex:
        return _error(str(ex), 400)
    if not res.ok:
        return _error(f"Error generating RSA key: {res.error}", 500)
    return jsonify({"status": "ok", "key": _key_json(res.key_pair)})


@app.post("/run_batch")
def run_batch():
    """Generate a key and synthetic messages, then report sequential vs. pooled runs."""
    try:
        params = _params()
        count = _int_param(params, "count", DEFAULT_MESSAGE_COUNT, 0, LAB_MAX_MESSAGES)
        workers = _int_param(params, "workers", DEFAULT_WORKERS, 1, LAB_MAX_WORKERS)
        executor = params.get("executor") or DEFAULT_EXECUTOR
        if not isinstance(executor, str) or executor not in EXECUTORS:
            raise BadParameter(f"executor must be one of {sorted(EXECUTORS)}")
        res, rng = _generate(params)
    except BadParameter as ex:
        return _error(str(ex), 400)
    if not res.ok:
        return _error(f"Error generating RSA key: {res.error}", 500)

    key_pair = res.key_pair
    messages = generate_messages(count, key_pair.public.n, rng)
    report = compare(messages, key_pair, workers, executor)
    return jsonify({
        "status": "ok",
        "key": _key_json(key_pair),
        "report": report.to_dict(),
    })


# -----------------------
# Run
# -----------------------
if __name__ == "__main__":
    # In production you should use gunicorn/uwsgi and not debug=True
    app.run(debug=True, host="127.0.0.1", port=5000)
