# src/inspector/query/criteria.py
from typing import Any, List

from .tags import resolve

# Selector code for "class name" in the server's find protocol.
CLASS_NAME_SELECTOR = 4
RESULT_LIMIT = 100
MATCH_ANY = "all"


def build_find_criteria(role: Any) -> List[Any]:
    """
    Builds the 'find all' payload for every class a tag name resolves to.

    e.g. build_find_criteria('button') ->
        ['all', [[4, 'android.widget.Button'], [100]],
                [[4, 'android.widget.ImageButton'], [100]]]
    """
    criteria: List[Any] = [MATCH_ANY]
    for class_name in resolve(role):
        criteria.append([[CLASS_NAME_SELECTOR, class_name], [RESULT_LIMIT]])
    return criteria
