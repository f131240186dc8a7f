"""toolchat — single-turn intent classification and tool dispatch."""
