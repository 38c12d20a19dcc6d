"""
CLI Modules

Everything around the ranking core that touches the outside world:
- config: exit statuses and flag defaults
- sources: reading possible values
- output: text and JSON rendering, error reporting
- suggestions: hints for mistyped options
"""

from suggestions.cli import config, output, sources, suggestions

__all__ = ['config', 'output', 'sources', 'suggestions']
