"""
Interactive chat session.

Reads commands and prompts, sends prompts to the active provider, records a
measurement per exchange and prints metrics and statistics.
"""

from __future__ import annotations

import logging
import signal
import threading
from contextlib import contextmanager
from typing import Callable, List, Optional

from .config.constants import BASE_URL_ENV_VAR
from .config.settings import ChatSettings, get_model_description
from .display import format_measurement, format_statistics
from .models.measurement import Measurement, SessionStatistics
from .observability.aggregator import SessionAggregator
from .observability.recorder import MetricsRecorder
from .providers.base import ProviderAdapter, ProviderError
from .providers.ollama import OllamaProvider


logger = logging.getLogger(__name__)

QUIT_COMMANDS = {"quit", "exit"}
MODEL_COMMAND = "model"
STATS_COMMAND = "stats"

ProviderFactory = Callable[[str, ChatSettings], ProviderAdapter]


def default_provider_factory(model: str, settings: ChatSettings) -> ProviderAdapter:
    return OllamaProvider.from_settings(model, settings)


@contextmanager
def interruptible_read():
    """
    Let Ctrl-C raise KeyboardInterrupt inside a blocking read.

    ``asyncio.run`` replaces the SIGINT handler with one that only cancels the
    main task, which leaves ``input()`` waiting. The default handler is put
    back for the duration of the read. Signal handlers can only be changed
    from the main thread; elsewhere the read runs unchanged.
    """
    if threading.current_thread() is not threading.main_thread():
        yield
        return

    previous = signal.signal(signal.SIGINT, signal.default_int_handler)
    try:
        yield
    finally:
        if previous is not None:
            signal.signal(signal.SIGINT, previous)


class ChatSession:
    """
    Drives the read → complete → record → display cycle.

    The session owns the active provider and replaces it on a model switch.
    One exchange is in flight at a time.
    """

    def __init__(
        self,
        settings: Optional[ChatSettings] = None,
        provider_factory: Optional[ProviderFactory] = None,
        recorder: Optional[MetricsRecorder] = None,
        aggregator: Optional[SessionAggregator] = None,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[..., None]] = None
    ):
        self.settings = settings or ChatSettings()
        self.provider_factory = provider_factory or default_provider_factory
        self.recorder = recorder or MetricsRecorder()
        self.aggregator = aggregator or SessionAggregator()
        self._input = input_fn or input
        self._output = output_fn or print
        self.provider: Optional[ProviderAdapter] = None
        self.model: Optional[str] = None
        self.summary_shown = False

    async def run(self, initial_model: Optional[str] = None) -> SessionStatistics:
        """
        Run the session until the user quits.

        Args:
            initial_model: Model to connect to without showing the menu

        Returns:
            Final statistics snapshot
        """
        self._emit("🤖 Ollama Performance Test Chat")
        self._emit("================================")

        model = initial_model or self.select_model()
        if model is None:
            return self.aggregator.snapshot()

        try:
            await self.connect(model)
            self._emit(f"\n✅ Connected to {model}")
            self._emit("Type 'quit' to exit, 'model' to switch models, 'stats' for session stats\n")

            while True:
                user_input = self._read("You: ")
                if user_input is None:
                    break

                command = user_input.strip()
                if not command:
                    continue

                lowered = command.lower()
                if lowered in QUIT_COMMANDS:
                    break

                if lowered == MODEL_COMMAND:
                    if not await self.switch_model():
                        break
                    continue

                if lowered == STATS_COMMAND:
                    self.show_stats()
                    continue

                measurement = await self.ask(user_input)
                self._emit(f"\nAI: {measurement.response_text}")
                self._emit_lines(format_measurement(measurement))
                self._emit()
        finally:
            await self._close_provider()

        self.show_summary()
        return self.aggregator.snapshot()

    def select_model(self) -> Optional[str]:
        """Show the model menu until a valid choice is made; None if input ends."""
        models: List[str] = self.settings.models
        self._emit("\nAvailable models:")
        for i, name in enumerate(models, start=1):
            description = get_model_description(name)
            self._emit(f"{i}. {name}" + (f" - {description}" if description else ""))

        while True:
            choice = self._read(f"Select model (1-{len(models)}): ")
            if choice is None:
                return None
            try:
                index = int(choice.strip())
            except ValueError:
                index = 0
            if 1 <= index <= len(models):
                return models[index - 1]
            self._emit("Invalid selection. Please try again.")

    async def connect(self, model: str) -> None:
        """
        Create a provider for ``model`` and run the connection handshake.

        Raises:
            SystemExit: With status 1 when the handshake fails
        """
        await self._close_provider()
        provider = self.provider_factory(model, self.settings)

        self._emit("Testing connection... ", end="", flush=True)
        try:
            await provider.ping()
        except ProviderError as e:
            await provider.close()
            self._emit(f"❌ Connection failed: {e.message}")
            self._emit(f"Make sure Ollama is running: 'ollama serve' (or set {BASE_URL_ENV_VAR})")
            raise SystemExit(1)
        self._emit("✅")

        self.provider = provider
        self.model = model
        logger.info(f"Connected to {model} via {provider.get_provider_name()} at {self.settings.base_url}")

    async def switch_model(self) -> bool:
        """Re-run model selection and reconnect. False if input ended in the menu."""
        previous = self.model
        model = self.select_model()
        if model is None:
            return False

        await self.connect(model)
        if self.settings.reset_stats_on_switch and model != previous:
            self.aggregator.reset()
        self._emit(f"✅ Switched to {model}\n")
        return True

    async def ask(self, prompt: str) -> Measurement:
        """Send a prompt to the active provider and record the measurement."""
        if self.provider is None:
            raise RuntimeError("No model connected")

        provider = self.provider
        measurement = await self.recorder.measure_async(lambda: provider.complete(prompt))
        self.aggregator.record(measurement)
        return measurement

    def show_stats(self) -> None:
        self._emit_lines(format_statistics(self.aggregator.snapshot()))

    def show_summary(self) -> None:
        """Print the final statistics once; later calls do nothing."""
        if self.summary_shown:
            return
        self.summary_shown = True
        self._emit("\n📊 Final Session Summary:")
        self.show_stats()
        logger.info(f"Session finished: {self.aggregator.snapshot().to_dict()}")

    # Private methods

    def _read(self, prompt: str) -> Optional[str]:
        try:
            with interruptible_read():
                return self._input(prompt)
        except (EOFError, KeyboardInterrupt):
            self._emit()
            return None

    def _emit(self, text: str = "", **kwargs) -> None:
        self._output(text, **kwargs)

    def _emit_lines(self, lines: List[str]) -> None:
        for line in lines:
            self._emit(line)

    async def _close_provider(self) -> None:
        if self.provider is not None:
            await self.provider.close()
            self.provider = None
