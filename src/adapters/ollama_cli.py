"""Colector basado en la CLI de Ollama (`ollama show --verbose <modelo>`).

Por qué un adaptador:
- Aísla el manejo del proceso externo (argv, timeout, códigos de salida) del
  parser de texto, que vive en el Core y se testea sin procesos.
- Convierte cualquier fallo en un `CollectionResult` con `error`: nunca propaga
  excepciones al llamador.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from typing import Sequence

from core.config import AppSettings
from core.domain.record import CollectionResult
from core.services.metadata_parser import parse_show_output

logger = logging.getLogger(__name__)


def build_command(settings: AppSettings, model_name: str) -> list[str]:
    return [settings.ollama_executable, *settings.show_args, model_name]


def run_command(argv: Sequence[str], *, timeout: float | None = None) -> str:
    """Ejecuta `argv` y devuelve su stdout.

    - stdin no se suministra (DEVNULL); stderr se hereda (va a la terminal).
    - Espera a que el proceso termine; con `timeout` lo mata al expirar.

    Lanza `OSError`, `subprocess.TimeoutExpired` o `subprocess.CalledProcessError`.
    """

    completed = subprocess.run(
        list(argv),
        stdin=subprocess.DEVNULL,
        stdout=subprocess.PIPE,
        stderr=None,
        text=True,
        encoding="utf-8",
        errors="replace",
        timeout=timeout,
        check=True,
    )
    return completed.stdout or ""


class OllamaCliSource:
    """Implementa `core.interfaces.metadata_source.MetadataSource`."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        self._settings = settings or AppSettings()

    def collect(self, model_name: str) -> CollectionResult:
        argv = build_command(self._settings, model_name)
        logger.debug("Running: %s", shlex.join(argv))

        try:
            output = run_command(argv, timeout=self._settings.command_timeout_seconds)
        except FileNotFoundError:
            return self._failed(
                model_name,
                f"Failed to start process: executable '{argv[0]}' not found",
            )
        except subprocess.TimeoutExpired as exc:
            return self._failed(model_name, f"Command timed out after {exc.timeout:g}s")
        except subprocess.CalledProcessError as exc:
            return self._failed(model_name, f"Command exited with status {exc.returncode}")
        except (OSError, ValueError) as exc:
            return self._failed(model_name, str(exc) or exc.__class__.__name__)

        return CollectionResult(model_name=model_name, record=parse_show_output(output))

    @staticmethod
    def _failed(model_name: str, message: str) -> CollectionResult:
        logger.info("Could not collect metadata for %s: %s", model_name, message)
        return CollectionResult(model_name=model_name, error=message)
