"""Testing utilities for treeops consumers."""

from .fixtures import DictNode, DictNavigator, RecordingProcessor

__all__ = ['DictNode', 'DictNavigator', 'RecordingProcessor']
