"""
Interactive workflow.

:mod:`vuku.interaction.prompter` asks the questions and
:mod:`vuku.interaction.orchestrator` decides which ones to ask.
"""

from .orchestrator import PromptOrchestrator, WorkflowCancelled, WorkflowResult  # noqa: F401
from .prompter import Prompter  # noqa: F401
