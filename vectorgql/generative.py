"""
Generative search: asks the service's generative module to produce text
from each result (single result) or from all results together (grouped
result). Rendered as a `generate(...)` field under `_additional`.
"""
from typing import List, Optional

from . import _serializer
from ._constants import GENERATE_ERROR, GENERATE_GROUPED_RESULT, GENERATE_SINGLE_RESULT
from .fields import Field


class GenerativeSearch:
    def __init__(
        self,
        *,
        single_result_prompt: Optional[str] = None,
        grouped_result_task: Optional[str] = None,
        grouped_result_properties: Optional[List[str]] = None,
    ) -> None:
        if single_result_prompt is None and grouped_result_task is None:
            raise ValueError("Generative search requires a single result prompt or a grouped result task")
        if grouped_result_properties is not None and grouped_result_task is None:
            raise ValueError("Grouped result properties require a grouped result task")
        self.single_result_prompt = single_result_prompt
        self.grouped_result_task = grouped_result_task
        self.grouped_result_properties = grouped_result_properties

    def build(self) -> Field:
        """
        Build the generate field.

        Returns:
            Field rendering as
            generate(singleResult:{...} groupedResult:{...}){singleResult groupedResult error}
        """
        arguments = []
        results = []
        if self.single_result_prompt is not None:
            arguments.append(
                f"{GENERATE_SINGLE_RESULT}:{{prompt:{_serializer.block_string(self.single_result_prompt)}}}"
            )
            results.append(GENERATE_SINGLE_RESULT)
        if self.grouped_result_task is not None:
            grouped = [f"task:{_serializer.block_string(self.grouped_result_task)}"]
            if self.grouped_result_properties is not None:
                grouped.append(
                    f"properties:{_serializer.array_with_quotes(self.grouped_result_properties)}"
                )
            arguments.append(f"{GENERATE_GROUPED_RESULT}:{{{' '.join(grouped)}}}")
            results.append(GENERATE_GROUPED_RESULT)
        results.append(GENERATE_ERROR)
        return Field(f"generate({' '.join(arguments)})", results)

    def __repr__(self) -> str:
        return f"GenerativeSearch({self.build().build()})"
