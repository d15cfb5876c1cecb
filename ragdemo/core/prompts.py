"""
Prompt templates.

RAG user-turn template and the fixed system instruction for image captioning.

Dependencies: langchain_core.prompts
System role: Prompt text shared by the orchestrator and chat client
"""

from langchain_core.documents import Document
from langchain_core.prompts import PromptTemplate

IMAGE_SYSTEM_INSTRUCTION = "이미지를 확실히 식별할 수 없다면 최선의 추측을 해보세요."

RAG_USER_TEMPLATE = """{question}

Context information is below, surrounded by ---------------------

---------------------
{context}
---------------------

Given the context and provided history information and not prior knowledge,
reply to the user comment. If the answer is not in the context, inform
the user that you can't answer the question.
"""

RAG_PROMPT = PromptTemplate.from_template(RAG_USER_TEMPLATE)


def format_context(documents: tuple[Document, ...] | list[Document]) -> str:
    """Join document contents in the order given (similarity rank)."""
    return "\n".join(doc.page_content for doc in documents)


def render_rag_user_text(question: str, documents: tuple[Document, ...] | list[Document]) -> str:
    """
    Render the augmented user turn.

    Args:
        question: The user's message
        documents: Retrieved documents, most similar first (may be empty)

    Returns:
        str: Question followed by the delimited context block
    """
    return RAG_PROMPT.format(question=question, context=format_context(documents))
