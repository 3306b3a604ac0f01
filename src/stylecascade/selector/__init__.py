from stylecascade.selector.matching import compile_selector, matches
from stylecascade.selector.specificity import compare_specificity, specificity

__all__ = ["compile_selector", "matches", "specificity", "compare_specificity"]
