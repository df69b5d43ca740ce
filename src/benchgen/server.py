"""
Query Server

Answers JSON queries from an optimizer client about one problem.

Query (client -> server):
    {"query_type": "call", "solution": [..], "id": 1}
    {"query_type": "new_run"}
    {"query_type": "stop"}

Reply (server -> client):
    {"reply_type": "value", "value": 12.5, "solution": [..], "id": 1}
    {"reply_type": "ack"}
    {"reply_type": "error", "code": 2, "message": "..."}

`id` and `remarks` of a query are echoed back. Replies carry a UTC
timestamp. Transport is one JSON document per line.
"""

import json
import logging
import sys
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, TextIO

import numpy as np

from .errors import BenchgenError
from .problem import Problem

logger = logging.getLogger(__name__)

# Error codes
ERR_PARSE = 1
ERR_QUERY_TYPE = 2
ERR_SOLUTION = 3
ERR_EVALUATION = 4


@dataclass
class RunLog:
    """Evaluation count and best-so-far of the current run."""
    maximization: bool = False
    evaluations: int = 0
    best_x: Optional[np.ndarray] = None
    best_y: Optional[float] = None
    history: List[float] = field(default_factory=list)

    def record(self, x: np.ndarray, y: float):
        self.evaluations += 1
        self.history.append(y)
        improved = (self.best_y is None or
                    (y > self.best_y if self.maximization else y < self.best_y))
        if improved:
            self.best_x = np.array(x, copy=True)
            self.best_y = y

    def reset(self):
        self.evaluations = 0
        self.best_x = None
        self.best_y = None
        self.history = []


class QueryHandler:
    """Turns queries into replies for a single problem."""

    def __init__(self, problem: Problem):
        self.problem = problem
        self.log = RunLog(maximization=problem.meta.maximization)
        self.runs = 1
        self.stopped = False

    def _reply(self, query: Dict[str, Any], reply_type: str, **fields) -> Dict[str, Any]:
        reply = {"reply_type": reply_type}
        reply.update(fields)
        for key in ("id", "remarks"):
            if key in query:
                reply[key] = query[key]
        reply["timestamp"] = datetime.now(timezone.utc).isoformat()
        return reply

    def _error(self, query: Dict[str, Any], code: int, message: str) -> Dict[str, Any]:
        logger.warning("Query rejected (code %d): %s", code, message)
        return self._reply(query, "error", code=code, message=message)

    def handle(self, query: Any) -> Dict[str, Any]:
        """Reply to one decoded query."""
        if not isinstance(query, dict):
            return self._error({}, ERR_PARSE, "query must be a JSON object")

        query_type = query.get("query_type")
        if query_type == "call":
            return self._call(query)
        if query_type == "new_run":
            self.log.reset()
            self.runs += 1
            logger.info("Starting run %d", self.runs)
            return self._reply(query, "ack")
        if query_type == "stop":
            self.stopped = True
            return self._reply(query, "ack")
        return self._error(query, ERR_QUERY_TYPE, f"unknown query_type: {query_type!r}")

    def _call(self, query: Dict[str, Any]) -> Dict[str, Any]:
        solution = query.get("solution")
        if not isinstance(solution, list) or not solution:
            return self._error(query, ERR_SOLUTION, "'solution' must be a non-empty array")
        try:
            x = np.array(solution, dtype=np.float64)
        except (TypeError, ValueError):
            return self._error(query, ERR_SOLUTION, "'solution' must contain only numbers")
        if x.ndim != 1:
            return self._error(query, ERR_SOLUTION, "'solution' must be a flat array")

        try:
            y = self.problem(x)
        except BenchgenError as e:
            return self._error(query, ERR_EVALUATION, str(e))

        self.log.record(x, y)
        return self._reply(query, "value", value=y, solution=solution)

    def handle_line(self, line: str) -> str:
        """Reply to one JSON encoded query."""
        try:
            query = json.loads(line)
        except json.JSONDecodeError as e:
            reply = self._error({}, ERR_PARSE, f"invalid JSON: {e.msg}")
        else:
            reply = self.handle(query)
        return json.dumps(reply)

    def serve(self, stream_in: TextIO = sys.stdin, stream_out: TextIO = sys.stdout) -> int:
        """
        Answer queries line by line until `stop` or end of input.

        Returns:
            Number of queries answered
        """
        answered = 0
        for line in stream_in:
            if not line.strip():
                continue
            stream_out.write(self.handle_line(line) + "\n")
            stream_out.flush()
            answered += 1
            if self.stopped:
                break
        logger.info("Served %d queries, %d evaluations in the last run",
                    answered, self.log.evaluations)
        return answered
