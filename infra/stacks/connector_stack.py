"""Connector stack: token secrets, poll Lambda and its schedule."""

from pathlib import Path
from typing import Any

from aws_cdk import (
    CfnOutput,
    Duration,
    Stack,
)
from aws_cdk import aws_events as events
from aws_cdk import aws_events_targets as targets
from aws_cdk import aws_lambda as lambda_
from aws_cdk import aws_logs as logs
from aws_cdk import aws_secretsmanager as secretsmanager
from constructs import Construct

_PROJECT_ROOT = str(Path(__file__).resolve().parent.parent.parent)

_LAMBDA_EXCLUDES = [
    "infra",
    "tests",
    "infra_tests",
    ".git",
    ".venv",
    "__pycache__",
    "*.md",
    "*.toml",
    "*.txt",
    "cdk.out",
    ".pytest_cache",
]


class ConnectorStack(Stack):
    """Secrets, scheduled poll Lambda and EventBridge rule for one layer."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        environment: str,
        config: dict[str, Any],
        **kwargs: Any,
    ) -> None:
        """Initialize the connector stack.

        Args:
            scope: CDK scope.
            construct_id: Unique identifier for this stack.
            environment: Deployment environment.
            config: Environment-specific configuration.
            **kwargs: Additional stack properties.
        """
        super().__init__(scope, construct_id, **kwargs)

        # Secret values are set out of band after the first deploy
        self.drone_sense_token = secretsmanager.Secret(
            self,
            "DroneSenseToken",
            secret_name=f"etl-drone-sense/{environment}/drone-sense-token",
            description="DroneSense API key sent as X-API-KEY",
            removal_policy=config["removal_policy"],
        )
        self.etl_token = secretsmanager.Secret(
            self,
            "EtlToken",
            secret_name=f"etl-drone-sense/{environment}/etl-token",
            description="Bearer token for the downstream layer API",
            removal_policy=config["removal_policy"],
        )

        poll_log_group = logs.LogGroup(
            self,
            "PollSchedulerLogGroup",
            log_group_name=f"/aws/lambda/etl-drone-sense-{environment}-poll",
            retention=config["log_retention"],
            removal_policy=config["removal_policy"],
        )
        self.poll_function = lambda_.Function(
            self,
            "PollScheduler",
            function_name=f"etl-drone-sense-{environment}-poll",
            runtime=lambda_.Runtime.PYTHON_3_12,
            handler="etl_drone_sense.handlers.poll_scheduler.handler",
            code=lambda_.Code.from_asset(_PROJECT_ROOT, exclude=_LAMBDA_EXCLUDES),
            timeout=Duration.seconds(config["timeout_seconds"]),
            memory_size=256,
            # Overlapping cycles would submit stale collections out of order
            reserved_concurrent_executions=1,
            retry_attempts=0,
            environment={
                "ENVIRONMENT": environment,
                "DRONE_SENSE_TOKEN_SECRET_ID": self.drone_sense_token.secret_arn,
                "ETL_API": config["etl_api"],
                "ETL_LAYER": config["etl_layer"],
                "ETL_TOKEN_SECRET_ID": self.etl_token.secret_arn,
                "DEBUG": str(config["debug"]).lower(),
                "LOG_FORMAT": "json",
            },
            log_group=poll_log_group,
        )

        self.drone_sense_token.grant_read(self.poll_function)
        self.etl_token.grant_read(self.poll_function)

        # The next scheduled run is the only recovery; no retries
        events.Rule(
            self,
            "PollSchedule",
            rule_name=f"etl-drone-sense-{environment}-poll-schedule",
            schedule=events.Schedule.rate(Duration.minutes(config["poll_interval_minutes"])),
            targets=[
                targets.LambdaFunction(  # type: ignore[list-item]
                    self.poll_function,
                    retry_attempts=0,
                )
            ],
            enabled=config["enable_schedule"],
        )

        CfnOutput(
            self,
            "PollFunctionArnOutput",
            value=self.poll_function.function_arn,
            description=f"DroneSense poll function ARN for {environment}",
            export_name=f"EtlDroneSense-{environment}-PollFunctionArn",
        )

        CfnOutput(
            self,
            "DroneSenseTokenSecretArnOutput",
            value=self.drone_sense_token.secret_arn,
            description=f"Secret to store the DroneSense API key in for {environment}",
            export_name=f"EtlDroneSense-{environment}-DroneSenseTokenSecretArn",
        )
