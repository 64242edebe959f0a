"""LLM generation: prompts, provider client and output normalization."""
