from enhancer.enhancer import PromptEnhancer

__all__ = ["PromptEnhancer"]
