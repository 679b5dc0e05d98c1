"""Voice task interpretation: turn spoken task descriptions into structured tasks."""
