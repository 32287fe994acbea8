import subprocess
import sys
from pathlib import Path


ROOT = Path(__file__).resolve().parent
PY_FILES = [
    "httpbrowser/__init__.py",
    "httpbrowser/constants.py",
    "httpbrowser/errors.py",
    "httpbrowser/paths.py",
    "httpbrowser/domain/messages.py",
    "httpbrowser/browser/engines.py",
    "httpbrowser/browser/errors.py",
    "httpbrowser/browser/headers.py",
    "httpbrowser/browser/host.py",
    "httpbrowser/browser/navigation.py",
    "httpbrowser/infra/config_store.py",
]


def run(cmd):
    print("> " + " ".join(cmd))
    result = subprocess.run(cmd, cwd=ROOT)
    if result.returncode != 0:
        raise SystemExit(result.returncode)


def main():
    run([sys.executable, "-m", "py_compile", *PY_FILES])
    run([sys.executable, "-c", "import httpbrowser; print('imports ok')"])
    run([sys.executable, "-m", "pytest", "-q"])
    print("All automated checks passed.")


if __name__ == "__main__":
    main()
