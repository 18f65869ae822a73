# Default model catalogue for the selection menu
MODEL_CONFIGS = {
    "llama3.2:latest": {
        "name": "llama3.2:latest",
        "description": "Meta Llama 3.2, 3B parameters",
    },
    "phi3.5:latest": {
        "name": "phi3.5:latest",
        "description": "Microsoft Phi-3.5 mini",
    },
    "phi3:latest": {
        "name": "phi3:latest",
        "description": "Microsoft Phi-3 mini",
    },
}
