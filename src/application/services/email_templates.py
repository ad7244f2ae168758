"""Transactional email content (Portuguese, PsicoZen branding).

Templates are plain functions returning an ``EmailMessage``; delivery goes
through ``EmailProtocol``.
"""

from dataclasses import dataclass
from html import escape

from src.domain.entities import EmociogramaAlert, EmociogramaSubmission

ALERT_SUBJECT_SUFFIX = "Alerta Emocional - PsicoZen"
DATA_DELETION_SUBJECT = "Confirmação de Exclusão de Dados - PsicoZen"


@dataclass(frozen=True, kw_only=True)
class EmailMessage:
    """Rendered email."""

    subject: str
    html: str
    text: str


def alert_subject(alert: EmociogramaAlert) -> str:
    """Subject line carrying the severity prefix.

    Example:
        "[CRÍTICO] Alerta Emocional - PsicoZen"
    """
    return f"{alert.severity.email_prefix} {ALERT_SUBJECT_SUFFIX}"


def alert_notification_email(
    *,
    alert: EmociogramaAlert,
    submission: EmociogramaSubmission,
    frontend_url: str,
) -> EmailMessage:
    """Manager notification for a new alert.

    The author is never named; department, team and the moderated comment
    give the manager context.

    Args:
        alert: Persisted alert.
        submission: Submission that triggered it.
        frontend_url: Base URL of the web app.

    Returns:
        EmailMessage ready to send.
    """
    link = f"{frontend_url}/emociograma/alerts/{alert.id}"
    level = f"{submission.emotion_emoji} Nível {submission.emotion_level}/10"

    details = [f"<li><strong>Nível:</strong> {level}</li>"]
    text_details = [f"Nível: {level}"]
    if submission.department:
        details.append(f"<li><strong>Departamento:</strong> {escape(submission.department)}</li>")
        text_details.append(f"Departamento: {submission.department}")
    if submission.team:
        details.append(f"<li><strong>Equipe:</strong> {escape(submission.team)}</li>")
        text_details.append(f"Equipe: {submission.team}")
    if submission.comment:
        # Comment is already HTML escaped by moderation.
        details.append(f"<li><strong>Comentário:</strong> {submission.comment}</li>")
        text_details.append(f"Comentário: {submission.comment}")

    html_body = (
        f"<h1>{escape(alert.severity.email_prefix)} Alerta Emocional</h1>"
        f"<p>{escape(alert.message)}</p>"
        f"<ul>{''.join(details)}</ul>"
        f'<p><a href="{link}">Ver alerta</a></p>'
        "<p><small>Este alerta foi gerado automaticamente pelo PsicoZen.</small></p>"
    )
    text_body = "\n".join(
        [alert.message, "", *text_details, "", f"Ver alerta: {link}"]
    )
    return EmailMessage(subject=alert_subject(alert), html=html_body, text=text_body)


def data_deletion_confirmation_email(*, confirmation_link: str) -> EmailMessage:
    """Confirmation request for LGPD data erasure (expires in 24 hours)."""
    html_body = (
        "<h1>Solicitação de Exclusão de Dados</h1>"
        "<p>Recebemos sua solicitação para excluir permanentemente seus dados pessoais.</p>"
        "<p><strong>ATENÇÃO:</strong> Esta ação é <strong>irreversível</strong>. "
        "Todos os seus dados serão permanentemente excluídos.</p>"
        "<p>Se você realmente deseja excluir seus dados, clique no link abaixo:</p>"
        f'<p><a href="{confirmation_link}">Confirmar Exclusão</a></p>'
        "<p>Este link expira em 24 horas.</p>"
        "<p>Se você não solicitou esta exclusão, ignore este email.</p>"
        "<hr><p><small>Esta solicitação foi feita em conformidade com a Lei Geral "
        "de Proteção de Dados (LGPD) - Artigo 18, VI.</small></p>"
    )
    text_body = (
        "Solicitação de Exclusão de Dados\n\n"
        "Recebemos sua solicitação para excluir permanentemente seus dados pessoais.\n\n"
        "ATENÇÃO: Esta ação é IRREVERSÍVEL. Todos os seus dados serão permanentemente excluídos.\n\n"
        f"Para confirmar a exclusão, acesse: {confirmation_link}\n\n"
        "Este link expira em 24 horas.\n\n"
        "Se você não solicitou esta exclusão, ignore este email.\n\n"
        "LGPD - Artigo 18, VI"
    )
    return EmailMessage(subject=DATA_DELETION_SUBJECT, html=html_body, text=text_body)
