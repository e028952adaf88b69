"""Tests for the Connector CDK stack."""

import aws_cdk as cdk
from aws_cdk import assertions
from aws_cdk import aws_logs as logs
from infra.stacks.connector_stack import ConnectorStack


def _create_connector_stack(**overrides) -> assertions.Template:
    """Create a connector stack and return the template."""
    app = cdk.App()
    config = {
        "removal_policy": cdk.RemovalPolicy.DESTROY,
        "log_retention": logs.RetentionDays.ONE_WEEK,
        "enable_schedule": True,
        "poll_interval_minutes": 1,
        "timeout_seconds": 60,
        "debug": False,
        "etl_api": "https://tak.example.com",
        "etl_layer": "7",
    }
    config.update(overrides)
    stack = ConnectorStack(app, "TestConnector", environment="test", config=config)
    return assertions.Template.from_stack(stack)


class TestSecrets:
    """Tests for the token secrets."""

    def test_two_secrets_created(self) -> None:
        """One secret per token."""
        template = _create_connector_stack()
        template.resource_count_is("AWS::SecretsManager::Secret", 2)

    def test_secret_names(self) -> None:
        """Secrets are namespaced by environment."""
        template = _create_connector_stack()
        template.has_resource_properties(
            "AWS::SecretsManager::Secret",
            {"Name": "etl-drone-sense/test/drone-sense-token"},
        )
        template.has_resource_properties(
            "AWS::SecretsManager::Secret",
            {"Name": "etl-drone-sense/test/etl-token"},
        )


class TestPollFunction:
    """Tests for the poll Lambda."""

    def test_single_function(self) -> None:
        """Exactly one Lambda function is created."""
        template = _create_connector_stack()
        template.resource_count_is("AWS::Lambda::Function", 1)

    def test_function_config(self) -> None:
        """Poll function has the expected runtime and limits."""
        template = _create_connector_stack()
        template.has_resource_properties(
            "AWS::Lambda::Function",
            {
                "FunctionName": "etl-drone-sense-test-poll",
                "Runtime": "python3.12",
                "Handler": "etl_drone_sense.handlers.poll_scheduler.handler",
                "Timeout": 60,
                "MemorySize": 256,
                "ReservedConcurrentExecutions": 1,
            },
        )

    def test_environment_variables(self) -> None:
        """Layer location and log format are passed through."""
        template = _create_connector_stack(debug=True)
        template.has_resource_properties(
            "AWS::Lambda::Function",
            {
                "Environment": {
                    "Variables": assertions.Match.object_like(
                        {
                            "ENVIRONMENT": "test",
                            "ETL_API": "https://tak.example.com",
                            "ETL_LAYER": "7",
                            "DEBUG": "true",
                            "LOG_FORMAT": "json",
                        }
                    )
                }
            },
        )

    def test_async_retries_disabled(self) -> None:
        """Failed invocations are not retried by Lambda."""
        template = _create_connector_stack()
        template.has_resource_properties(
            "AWS::Lambda::EventInvokeConfig",
            {"MaximumRetryAttempts": 0},
        )

    def test_log_group(self) -> None:
        """Log group is created with retention."""
        template = _create_connector_stack()
        template.has_resource_properties(
            "AWS::Logs::LogGroup",
            {
                "LogGroupName": "/aws/lambda/etl-drone-sense-test-poll",
                "RetentionInDays": 7,
            },
        )

    def test_function_can_read_secrets(self) -> None:
        """Function role is granted GetSecretValue."""
        template = _create_connector_stack()
        template.has_resource_properties(
            "AWS::IAM::Policy",
            {
                "PolicyDocument": {
                    "Statement": assertions.Match.array_with(
                        [
                            assertions.Match.object_like(
                                {
                                    "Action": assertions.Match.array_with(
                                        ["secretsmanager:GetSecretValue"]
                                    ),
                                    "Effect": "Allow",
                                }
                            )
                        ]
                    )
                }
            },
        )


class TestPollSchedule:
    """Tests for the EventBridge schedule."""

    def test_rate_schedule(self) -> None:
        """Rule fires at the configured rate."""
        template = _create_connector_stack(poll_interval_minutes=5)
        template.has_resource_properties(
            "AWS::Events::Rule",
            {
                "Name": "etl-drone-sense-test-poll-schedule",
                "ScheduleExpression": "rate(5 minutes)",
                "State": "ENABLED",
            },
        )

    def test_single_minute_rate(self) -> None:
        """A one-minute interval uses the singular unit."""
        template = _create_connector_stack(poll_interval_minutes=1)
        template.has_resource_properties(
            "AWS::Events::Rule",
            {"ScheduleExpression": "rate(1 minute)"},
        )

    def test_disabled_schedule(self) -> None:
        """Schedule can be deployed disabled."""
        template = _create_connector_stack(enable_schedule=False)
        template.has_resource_properties("AWS::Events::Rule", {"State": "DISABLED"})

    def test_target_retries_disabled(self) -> None:
        """EventBridge does not retry a failed cycle."""
        template = _create_connector_stack()
        template.has_resource_properties(
            "AWS::Events::Rule",
            {
                "Targets": [
                    assertions.Match.object_like(
                        {"RetryPolicy": {"MaximumRetryAttempts": 0}}
                    )
                ]
            },
        )


class TestOutputs:
    """Tests for stack outputs."""

    def test_outputs_exported(self) -> None:
        """Function and secret ARNs are exported."""
        template = _create_connector_stack()
        template.has_output(
            "PollFunctionArnOutput",
            {"Export": {"Name": "EtlDroneSense-test-PollFunctionArn"}},
        )
        template.has_output(
            "DroneSenseTokenSecretArnOutput",
            {"Export": {"Name": "EtlDroneSense-test-DroneSenseTokenSecretArn"}},
        )
