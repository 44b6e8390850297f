# packages/twfswf/src/twfswf/cli/__init__.py
# Entrypoints: python -m twfswf.cli.list (console script: twfs-list)
