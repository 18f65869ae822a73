"""
Example: Non-interactive benchmark

Sends a fixed list of prompts to one Ollama model, prints each exchange's
metrics and finishes with the session statistics.
"""

import asyncio
import sys

from ollama_perf_chat import ChatSettings, MetricsRecorder, OllamaProvider, SessionAggregator
from ollama_perf_chat.display import format_measurement, format_statistics


PROMPTS = [
    "Say hello in one word.",
    "Write a haiku about Python programming.",
    "Explain what a hash map is in three sentences.",
]


async def benchmark(model: str):
    settings = ChatSettings.from_env()
    provider = OllamaProvider.from_settings(model, settings)
    recorder = MetricsRecorder()
    aggregator = SessionAggregator()

    try:
        for prompt in PROMPTS:
            print(f"\nYou: {prompt}")
            measurement = await recorder.measure_async(lambda: provider.complete(prompt))
            aggregator.record(measurement)
            print(f"AI: {measurement.response_text}")
            for line in format_measurement(measurement):
                print(line)
    finally:
        await provider.close()

    for line in format_statistics(aggregator.snapshot()):
        print(line)


if __name__ == "__main__":
    asyncio.run(benchmark(sys.argv[1] if len(sys.argv) > 1 else "llama3.2:latest"))
