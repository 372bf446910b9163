"""
Coffee recommendation engine.

Responsibilities:
- Hold the curated coffee profile catalog and the brew-tips table.
- Score every profile against a set of quiz answers using fixed weights.
- Pick a best match plus a meaningfully different alternative.
- Render the explanation, confidence and cafe-order text for the result.
"""
