# config.py
# Lab defaults. Every value can be overridden from the environment so the
# CLI and the dashboard pick up the same settings.

import os

# ======== CONFIGURABLE PARAMETERS ========
MR_ROUNDS = int(os.getenv("RSABENCH_MR_ROUNDS", "25"))
MAX_PRIME_ATTEMPTS = int(os.getenv("RSABENCH_MAX_PRIME_ATTEMPTS", "10000"))
DEFAULT_MODULUS_BITS = int(os.getenv("RSABENCH_MODULUS_BITS", "512"))
DEFAULT_MESSAGE_COUNT = int(os.getenv("RSABENCH_MESSAGE_COUNT", "200"))
DEFAULT_WORKERS = int(os.getenv("RSABENCH_WORKERS", "4"))
DEFAULT_EXECUTOR = os.getenv("RSABENCH_EXECUTOR", "thread")

# Dashboard safety limits (requests outside these get a 400)
LAB_MIN_BITS = int(os.getenv("RSABENCH_LAB_MIN_BITS", "16"))
LAB_MAX_BITS = int(os.getenv("RSABENCH_LAB_MAX_BITS", "2048"))
LAB_MAX_MESSAGES = int(os.getenv("RSABENCH_LAB_MAX_MESSAGES", "5000"))
LAB_MAX_WORKERS = int(os.getenv("RSABENCH_LAB_MAX_WORKERS", "32"))
# ========================================
