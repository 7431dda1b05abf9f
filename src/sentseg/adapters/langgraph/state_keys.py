"""Default state key names for LangGraph integration."""

# Standard state keys used by sentseg nodes
INPUT_TEXT = "input_text"
SENTENCES = "sentences"

# Additional optional keys
LANGUAGE = "language"
