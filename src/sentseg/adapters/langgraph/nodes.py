"""LangGraph node factories for sentence segmentation."""

from typing import Optional
from langchain_core.runnables import RunnableLambda
from ...runtime.segmenter import Segmenter, shared_segmenter
from .state_keys import INPUT_TEXT, LANGUAGE, SENTENCES

def make_segment_node(segmenter: Segmenter, text_key: str = INPUT_TEXT,
                      output_key: str = SENTENCES):
    """
    Create a LangGraph node that splits a state text into sentences.

    Args:
        segmenter: Configured Segmenter instance
        text_key: State key containing the text to segment
        output_key: State key that receives the sentence list

    Returns:
        RunnableLambda: Node that adds the sentence list to state
    """
    def _segment(state):
        text = state.get(text_key, "")
        return {output_key: segmenter.segment(text)}

    return RunnableLambda(_segment)

def make_language_aware_segment_node(text_key: str = INPUT_TEXT,
                                     language_key: str = LANGUAGE,
                                     output_key: str = SENTENCES,
                                     default_language: str = "en",
                                     doc_type: Optional[str] = None):
    """
    Create a node that picks the segmentation language from graph state.

    Segmenters come from the shared bounded cache, keyed by normalized
    language code.
    """
    def _segment(state):
        language = state.get(language_key) or default_language
        return {output_key: shared_segmenter(language, doc_type).segment(state.get(text_key, ""))}

    return RunnableLambda(_segment)
