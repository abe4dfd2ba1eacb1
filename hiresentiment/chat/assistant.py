"""Recruiter chat assistant: short model replies with a rule-based fallback."""

import logging
from concurrent.futures import ThreadPoolExecutor

from hiresentiment.core.config import ModelCallConfig
from hiresentiment.core.schemas import ChatReply
from hiresentiment.llm import clean_response
from hiresentiment.llm.base import LLMProvider
from hiresentiment.pipeline.orchestrator import InvalidQueryError

logger = logging.getLogger(__name__)

FALLBACK_MODEL = "rule-based"
HISTORY_WINDOW = 3

CHAT_SYSTEM_PROMPT = (
    "You are an AI talent assistant. You ONLY provide brief, friendly responses.\n\n"
    'For candidate search requests (like "top 5 react developers", '
    '"find python developers", etc.), respond with a VARIED positive message '
    "each time, such as:\n"
    '- "Perfect! I\'ve found some great candidates for you!"\n'
    '- "Excellent! Here are some top candidates I found!"\n'
    '- "Fantastic! I found some talented candidates!"\n'
    '- "Great! I\'ve discovered some top talent for you!"\n\n'
    "For general questions, provide brief 1-2 sentence answers only. "
    "Do NOT provide detailed explanations, lists, or advice."
)

_SEARCH_CUES = ("find", "search", "candidate")

HELP_TEXT = (
    "I'm your AI talent assistant! I can help you:\n"
    "• Find candidates with specific skills (React, Python, DevOps, etc.)\n"
    "• Search by experience level (junior, senior, lead)\n"
    "• Analyze candidate pools and provide insights\n"
    "• Suggest search strategies\n\n"
    "Just tell me what you're looking for!"
)

DEFAULT_TEXT = (
    "I'm here to help you with candidate search and recruitment. You can ask me to:\n"
    "• Find candidates with specific skills (e.g., 'React developers', 'Python engineers')\n"
    "• Search by technology stack (e.g., 'AWS DevOps', 'Mobile developers')\n"
    "• Get insights about our candidate pool\n"
    "• Refine your search criteria\n\n"
    "What would you like to search for?"
)

# Checked in order after the search intent; first rule with a cue present wins.
_TOPIC_RULES: list[tuple[tuple[str, ...], str]] = [
    (
        ("react", "javascript", "frontend"),
        "Great! I can help you find frontend developers. We have candidates with "
        "React, JavaScript, TypeScript, and other frontend technologies. Would you "
        "like me to search for React developers specifically?",
    ),
    (
        ("python", "java", "backend"),
        "Excellent! I can help you find backend developers. We have candidates with "
        "Python, Java, Node.js, and other backend technologies. Would you like me to "
        "search for Python developers specifically?",
    ),
    (
        ("devops", "aws", "cloud"),
        "Perfect! I can help you find DevOps and cloud engineers. We have candidates "
        "with AWS, Azure, Kubernetes, Docker, and other DevOps tools. Would you like "
        "me to search for DevOps engineers?",
    ),
    (
        ("mobile", "ios", "android"),
        "Great choice! I can help you find mobile developers. We have candidates with "
        "iOS, Android, React Native, and Flutter experience. Would you like me to "
        "search for mobile developers?",
    ),
    (
        ("data", "machine learning", "ai"),
        "Excellent! I can help you find data scientists and ML engineers. We have "
        "candidates with Python, TensorFlow, PyTorch, and other data science tools. "
        "Would you like me to search for data scientists?",
    ),
    (
        ("skill", "experience", "requirement"),
        "I can search our candidate database based on skills and experience. Please "
        "describe the technical skills, years of experience, or specific requirements "
        "you're looking for.",
    ),
    (("help", "how"), HELP_TEXT),
    (
        ("hello", "hi", "hey"),
        "Hello! I'm your AI talent assistant. I can help you find and analyze "
        "candidates. What can I help you with today?",
    ),
    (
        ("thank", "thanks"),
        "You're welcome! I'm here to help you find the best candidates. Is there "
        "anything else you'd like to search for?",
    ),
]


def fallback_reply(message: str, history: list[dict[str, str]] | None = None) -> str:
    """Deterministic keyword-intent reply used when no model answer is available."""
    message_lower = message.lower()

    if any(cue in message_lower for cue in _SEARCH_CUES):
        recent = (history or [])[-HISTORY_WINDOW:]
        if any(
            any(cue in str(m.get("text", "")).lower() for cue in _SEARCH_CUES)
            for m in recent
        ):
            return (
                "I can help you refine your search! You can search for candidates by "
                "specific skills, technologies, or experience levels. What specific "
                "requirements are you looking for?"
            )
        return (
            "I can help you find candidates! Try searching for specific skills like "
            "'React developer', 'Python engineer', or 'DevOps specialist'. What type "
            "of candidate are you looking for?"
        )

    for cues, text in _TOPIC_RULES:
        if any(cue in message_lower for cue in cues):
            return text
    return DEFAULT_TEXT


def reply(
    message: str,
    history: list[dict[str, str]] | None,
    provider: LLMProvider | None,
    config: ModelCallConfig,
) -> ChatReply:
    """Answer a chat message, falling back to rule-based text on any model failure.

    Raises:
        InvalidQueryError: If the message is empty or not a string, or the
            history is not a list of message objects.
    """
    if not isinstance(message, str) or not message.strip():
        msg = "Message is required"
        raise InvalidQueryError(msg)
    if history is not None and (
        not isinstance(history, list) or not all(isinstance(m, dict) for m in history)
    ):
        msg = "conversationHistory must be a list of message objects"
        raise InvalidQueryError(msg)

    if provider is None or not config.enabled:
        return ChatReply(message=fallback_reply(message, history), model=FALLBACK_MODEL)

    model_name = config.model or provider.default_model
    executor = ThreadPoolExecutor(max_workers=1)
    try:
        future = executor.submit(
            provider.complete,
            message,
            config.model,
            system=CHAT_SYSTEM_PROMPT,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
            timeout=config.timeout_seconds,
        )
        text = clean_response(future.result(timeout=config.timeout_seconds))
        if not text:
            msg = f"No response content from {provider.provider_id}"
            raise ValueError(msg)
    except Exception:
        logger.warning(
            "Chat reply via %s failed, using rule-based reply",
            provider.provider_id,
            exc_info=True,
        )
        return ChatReply(message=fallback_reply(message, history), model=FALLBACK_MODEL)
    finally:
        executor.shutdown(wait=False, cancel_futures=True)

    return ChatReply(message=text, model=model_name)
