# backend/wishwello/infra/notifications.py
"""
Delivery of pulse-drop alerts.

PulseService only knows the AlertSink protocol; the concrete sink is
chosen from settings.ALERT_SINK by build_alert_sink() and injected.
Delivery is fire-and-forget: a sink never raises back into the caller.
"""
import asyncio
import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Optional, Protocol

from wishwello.core.config import Settings, settings
from wishwello.engine.pulse.alerting import PulseAlert
from wishwello.shared.enums import AlertSinkKind

logger = logging.getLogger(__name__)


class AlertSink(Protocol):
    async def notify(self, alert: PulseAlert) -> None: ...


class LoggingAlertSink:
    """Default sink: the alert only goes to the application log."""

    async def notify(self, alert: PulseAlert) -> None:
        logger.warning(
            "ALERT: team %s pulse score dropped by %.1f points (now %.1f)",
            alert.team_id, alert.drop, alert.current_score,
        )


class EmailAlertSink:

    def __init__(
        self,
        to_email: str,
        smtp_server: str,
        smtp_port: int,
        smtp_user: Optional[str],
        smtp_password: Optional[str],
        from_email: str,
        base_url: str,
    ):
        self.to_email = to_email
        self.smtp_server = smtp_server
        self.smtp_port = smtp_port
        self.smtp_user = smtp_user
        self.smtp_password = smtp_password
        self.from_email = from_email
        self.base_url = base_url

    def build_message(self, alert: PulseAlert) -> MIMEMultipart:
        dashboard_url = f"{self.base_url}/teams/{alert.team_id}/dashboard"

        message = MIMEMultipart("alternative")
        message["Subject"] = f"Pulse alert: score dropped by {alert.drop:.1f} points"
        message["From"] = f"WishWello <{self.from_email}>"
        message["To"] = self.to_email

        text = (
            f"Your team's pulse score dropped by {alert.drop:.1f} points this week "
            f"and is now {alert.current_score:.1f}/10. Dashboard: {dashboard_url}"
        )
        html = f"""
        <html>
          <body style="font-family: Arial, sans-serif; color: #0F172A;">
            <h2>Pulse score alert</h2>
            <p>Your team's pulse score dropped by <strong>{alert.drop:.1f}</strong> points
               this week and is now <strong>{alert.current_score:.1f}/10</strong>.</p>
            <p><a href="{dashboard_url}">Open the dashboard</a></p>
          </body>
        </html>
        """
        message.attach(MIMEText(text, "plain"))
        message.attach(MIMEText(html, "html"))
        return message

    def _send(self, message: MIMEMultipart) -> None:
        with smtplib.SMTP(self.smtp_server, self.smtp_port) as server:
            server.starttls()
            if self.smtp_user:
                server.login(self.smtp_user, self.smtp_password or "")
            server.sendmail(self.from_email, self.to_email, message.as_string())

    async def notify(self, alert: PulseAlert) -> None:
        message = self.build_message(alert)
        try:
            await asyncio.to_thread(self._send, message)
        except (smtplib.SMTPException, OSError) as e:
            logger.error("SMTP error while sending pulse alert for team %s: %s", alert.team_id, e)
            return
        logger.info("Pulse alert for team %s sent to %s", alert.team_id, self.to_email)


def build_alert_sink(config: Settings = settings) -> AlertSink:
    """Sink selected by ALERT_SINK. Falls back to the log sink when no recipient is set."""
    kind = AlertSinkKind(config.ALERT_SINK)
    if kind is AlertSinkKind.EMAIL:
        if not config.ALERT_EMAIL_TO:
            logger.warning("ALERT_SINK=email but ALERT_EMAIL_TO is empty, alerts will only be logged")
            return LoggingAlertSink()
        return EmailAlertSink(
            to_email=config.ALERT_EMAIL_TO,
            smtp_server=config.SMTP_SERVER,
            smtp_port=config.SMTP_PORT,
            smtp_user=config.SMTP_USER,
            smtp_password=config.SMTP_PASSWORD,
            from_email=config.EMAIL_FROM,
            base_url=config.BASE_URL,
        )
    return LoggingAlertSink()
