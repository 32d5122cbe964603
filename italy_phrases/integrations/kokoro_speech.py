"""Kokoro-backed speech synthesis with sounddevice playback."""
from __future__ import annotations

import threading
from typing import Any, Callable

import numpy as np
import torch

from ..constants import SAMPLE_RATE
from ..domain.voice import resolve_voice

try:
    import sounddevice as sd
except Exception:  # pragma: no cover
    sd = None

AudioPlayer = Callable[[np.ndarray, int], None]


def play_with_sounddevice(audio: np.ndarray, sample_rate: int) -> None:
    if sd is None:
        raise RuntimeError("sounddevice is not available; audio output is disabled.")
    sd.play(audio, samplerate=int(sample_rate), blocking=False)


class Utterance:
    """One synthesis request: text in, audio out to the player."""

    def __init__(
        self,
        *,
        text: str,
        voice: str,
        speed: float,
        use_gpu: bool,
        model_manager,
        player: AudioPlayer,
        logger,
    ) -> None:
        self.text = text
        self.voice = voice
        self.speed = float(speed)
        self.use_gpu = bool(use_gpu)
        self.model_manager = model_manager
        self.player = player
        self.logger = logger

    def synthesize(self) -> np.ndarray | None:
        if not self.text.strip():
            return None
        pipeline = self.model_manager.get_pipeline(self.voice)
        pack = self.model_manager.get_voice_pack(self.voice)
        model = self.model_manager.get_model(self.use_gpu)
        chunks: list[np.ndarray] = []
        with torch.inference_mode():
            for _, ps, _ in pipeline(self.text, self.voice, self.speed):
                if not ps:
                    continue
                audio: Any = model(ps, pack[len(ps) - 1], self.speed)
                if hasattr(audio, "cpu"):
                    audio = audio.cpu()
                chunks.append(np.asarray(audio, dtype=np.float32).flatten())
        if not chunks:
            return None
        return np.concatenate(chunks)

    def run(self) -> None:
        try:
            audio = self.synthesize()
            if audio is None or audio.size == 0:
                self.logger.debug("Nothing to speak for text=%r", self.text)
                return
            self.player(audio, SAMPLE_RATE)
            self.logger.debug(
                "Playing utterance: voice=%s speed=%.2f samples=%s",
                self.voice,
                self.speed,
                audio.size,
            )
        except Exception:
            self.logger.exception("Speech playback failed: voice=%s", self.voice)


class KokoroSpeechService:
    """SpeechService that runs every utterance on its own daemon thread."""

    def __init__(
        self,
        model_manager,
        logger,
        *,
        preferred_voice: str | None = None,
        use_gpu: bool = False,
        player: AudioPlayer | None = None,
        thread_factory: Callable[..., Any] = threading.Thread,
    ) -> None:
        self.model_manager = model_manager
        self.logger = logger
        self.preferred_voice = preferred_voice
        self.use_gpu = bool(use_gpu)
        if player is None and sd is not None:
            player = play_with_sounddevice
        self.player = player
        self.thread_factory = thread_factory

    def speak(self, text: str, locale: str, rate: float) -> None:
        voice = resolve_voice(locale, self.preferred_voice)
        if self.player is None:
            self.logger.warning("sounddevice is not installed. Speech playback is unavailable.")
            return
        utterance = Utterance(
            text=str(text),
            voice=voice,
            speed=rate,
            use_gpu=self.use_gpu,
            model_manager=self.model_manager,
            player=self.player,
            logger=self.logger,
        )
        worker = self.thread_factory(target=utterance.run, name="speech-utterance", daemon=True)
        worker.start()
