"""
Server helper functions shared by the API endpoints
"""

import asyncio
import json
import random
from typing import Any, Dict, Tuple


def format_sse_data(data: Dict[str, Any]) -> str:
    """Format data as a Server-Sent Events frame"""
    return f"data: {json.dumps(data)}\n\n"


async def random_delay(delay_range: Tuple[float, float]) -> float:
    """Sleep for a random duration within ``delay_range`` seconds, returns the delay"""
    low, high = delay_range
    delay = random.uniform(low, high) if high > low else max(low, 0.0)
    if delay > 0:
        await asyncio.sleep(delay)
    return delay
