# src/pyright_review/review/keys.py
import hashlib

KEY_LENGTH = 16

FILE_SUBJECT = "file"
SUMMARY_SUBJECT = "summary"
COMPARISON_SUBJECT = "comparison"


def derive_key(prefix: str, discriminant: str) -> str:
    """Stable hex key for a comment subject.

    The prefix is hashed together with the discriminant, so subjects of
    different kinds never share a key even when their discriminants match.
    """
    digest = hashlib.sha256(f"{prefix}\x00{discriminant}".encode("utf-8")).hexdigest()
    return digest[:KEY_LENGTH]


def file_key(pr_number: int, path: str) -> str:
    return derive_key(FILE_SUBJECT, f"{pr_number}:{path}")


def summary_key(pr_number: int) -> str:
    return derive_key(SUMMARY_SUBJECT, str(pr_number))


def comparison_key(pr_number: int) -> str:
    return derive_key(COMPARISON_SUBJECT, str(pr_number))
