"""Exam question generation from study material via Gemini."""
