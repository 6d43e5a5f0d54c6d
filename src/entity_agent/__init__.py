from entity_agent.commands.generate import OutputTarget, run_generate

__all__ = ["OutputTarget", "run_generate"]
