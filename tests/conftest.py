from __future__ import annotations

from operand_align.runtime import telemetry

telemetry.configure(preset="quiet")
