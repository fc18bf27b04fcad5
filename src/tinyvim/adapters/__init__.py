"""Host integrations that drive the editor engine."""
