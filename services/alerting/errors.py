"""
Classified failures raised while talking to Alertmanager. Each subclass carries a human readable message that tool handlers render verbatim behind their own error prefix.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""


class AlertManagerError(Exception):
    pass


class AlertManagerTimeoutError(AlertManagerError):
    def __init__(self, timeout: float):
        self.timeout = timeout
        super().__init__(f"Alertmanager request timed out after {timeout:g}s")


class AlertManagerConnectionError(AlertManagerError):
    def __init__(self, detail: str):
        super().__init__(f"Alertmanager connection failed: {detail}")


class AlertManagerStatusError(AlertManagerError):
    def __init__(self, status_code: int, reason: str):
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"Alertmanager API error: {status_code} {reason}".rstrip())


class AlertManagerResponseError(AlertManagerError):
    def __init__(self, detail: str):
        super().__init__(f"Invalid Alertmanager response: {detail}")


class AlertNotFoundError(AlertManagerError):
    def __init__(self, fingerprint: str):
        self.fingerprint = fingerprint
        super().__init__(f"Alert with fingerprint {fingerprint} not found")
