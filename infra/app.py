#!/usr/bin/env python3
"""CDK application entry point for the DroneSense connector."""

import os
from datetime import UTC, datetime

import aws_cdk as cdk
from aws_cdk import aws_logs as logs

from stacks.connector_stack import ConnectorStack

app = cdk.App()

# Get environment from context or environment variable
environment = (
    app.node.try_get_context("environment") or os.environ.get("CDK_ENVIRONMENT") or "development"
)

account = (
    app.node.try_get_context("account")
    or os.environ.get("CDK_DEFAULT_ACCOUNT")
    or os.environ.get("AWS_ACCOUNT_ID")
)

region = (
    app.node.try_get_context("region")
    or os.environ.get("CDK_DEFAULT_REGION")
    or os.environ.get("AWS_REGION")
    or "us-east-1"
)

etl_api = app.node.try_get_context("etl_api") or os.environ.get("ETL_API", "")
etl_layer = app.node.try_get_context("etl_layer") or os.environ.get("ETL_LAYER", "")

# Environment-specific configuration
environment_config = {
    "development": {
        "removal_policy": cdk.RemovalPolicy.DESTROY,
        "log_retention": logs.RetentionDays.ONE_WEEK,
        "enable_schedule": False,
        "poll_interval_minutes": 1,
        "timeout_seconds": 60,
        "debug": True,
    },
    "testing": {
        "removal_policy": cdk.RemovalPolicy.DESTROY,
        "log_retention": logs.RetentionDays.TWO_WEEKS,
        "enable_schedule": True,
        "poll_interval_minutes": 5,
        "timeout_seconds": 60,
        "debug": True,
    },
    "demo": {
        "removal_policy": cdk.RemovalPolicy.RETAIN,
        "log_retention": logs.RetentionDays.ONE_MONTH,
        "enable_schedule": True,
        "poll_interval_minutes": 1,
        "timeout_seconds": 60,
        "debug": False,
    },
    "production": {
        "removal_policy": cdk.RemovalPolicy.RETAIN,
        "log_retention": logs.RetentionDays.THREE_MONTHS,
        "enable_schedule": True,
        "poll_interval_minutes": 1,
        "timeout_seconds": 60,
        "debug": False,
    },
}

config = {
    **environment_config[environment],
    "etl_api": etl_api,
    "etl_layer": etl_layer,
}
cdk_env = cdk.Environment(account=account, region=region)

ConnectorStack(
    app,
    f"EtlDroneSense-{environment}",
    environment=environment,
    config=config,
    env=cdk_env,
)

cdk.Tags.of(app).add("Project", "EtlDroneSense")
cdk.Tags.of(app).add("ManagedBy", "CDK")
cdk.Tags.of(app).add("Environment", environment)
cdk.Tags.of(app).add("DeployedAt", datetime.now(UTC).isoformat())

app.synth()
