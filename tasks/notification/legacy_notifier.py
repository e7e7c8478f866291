"""
Legacy notifier (the "before" of the refactoring exercise).

Formatting, routing and sending all live in process_alert(); adding a
format or a channel means editing this method.
"""

from datetime import datetime
from typing import List


class LegacyNotifier:

    def __init__(self):
        # Used for verification in tests
        self.log_history: List[str] = []

    def process_alert(self, message: str, severity: str, format_type: str, channels: List[str]) -> List[str]:
        """
        Format an alert and push it to the requested channels.

        Raises:
            ValueError: If format_type is not "text" or "json"
        """
        timestamp = datetime.now().isoformat()

        if format_type == "text":
            formatted = f"[{timestamp}] {severity.upper()}: {message}"
        elif format_type == "json":
            formatted = f'{{ "timestamp": "{timestamp}", "level": "{severity}", "content": "{message}" }}'
        else:
            raise ValueError("Unknown format")

        results = []

        if "email" in channels:
            output = f"Email sent to admin@company.com: {formatted}"
            print(output)
            results.append("EMAIL_SENT")
            self.log_history.append(output)

        if "sms" in channels:
            if severity == "critical":
                output = f"SMS sent to 555-0199: {formatted}"
                print(output)
                results.append("SMS_SENT")
                self.log_history.append(output)
            else:
                print("SMS skipped (not critical)")

        if "log" in channels:
            output = f"Writing to disk: {formatted}"
            print(output)
            results.append("LOGGED")
            self.log_history.append(output)

        return results


def main():
    print("--- Legacy notifier ---")
    notifier = LegacyNotifier()
    print(notifier.process_alert("Disk space low", "warning", "text", ["email", "log"]))
    print(notifier.process_alert("Database Crash", "critical", "json", ["sms", "email"]))
    print(notifier.process_alert("System stable", "info", "text", ["sms"]))


if __name__ == '__main__':
    main()
