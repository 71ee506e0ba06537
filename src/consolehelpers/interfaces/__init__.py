"""
Interfaces for the consolehelpers package.

This package contains the question asking classes built on a terminal channel.
"""
from consolehelpers.interfaces.helper import InteractiveCliHelper
from consolehelpers.interfaces.list_editor import EditorState, ListEditor
from consolehelpers.interfaces.prompter import Prompter, Question

__all__ = ['InteractiveCliHelper', 'ListEditor', 'EditorState', 'Prompter', 'Question']
