# backend/pdfsearch/core/prompts.py

ANSWER_PROMPT = """You are a helpful assistant answering questions based on an uploaded document.
Context:
{context}
Question:
{question}
Answer in points paragraph."""
