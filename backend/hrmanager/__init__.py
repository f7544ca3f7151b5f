"""HR manager: candidates, positions and interviews driven by text commands."""
