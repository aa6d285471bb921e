import time

from django.core.management.base import BaseCommand, CommandError

from readiness.exceptions import ConfigurationError, ProviderError
from readiness.services import ReadinessAdvisor

PING_PROMPT = 'Reply with the JSON object {"ok": true} and nothing else.'


class Command(BaseCommand):
    help = 'Sends a tiny JSON prompt through every configured readiness provider'

    def handle(self, *args, **kwargs):
        try:
            advisor = ReadinessAdvisor.from_settings()
        except ConfigurationError as e:
            raise CommandError(str(e)) from e

        self.stdout.write(self.style.WARNING('Testing readiness providers...'))

        failures = 0
        for provider in advisor.providers:
            start_time = time.time()
            try:
                payload = provider.generate(PING_PROMPT)
            except ProviderError as e:
                failures += 1
                self.stdout.write(self.style.ERROR(f"FAIL {provider.name}: {e.detail}"))
                continue
            elapsed = time.time() - start_time
            self.stdout.write(self.style.SUCCESS(f"OK   {provider.name} ({elapsed:.2f}s): {payload}"))

        if failures == len(advisor.providers):
            raise CommandError("All providers failed.")
