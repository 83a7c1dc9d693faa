"""Unit tests for the eight service client operation tables."""

import json
from unittest.mock import MagicMock
from urllib.parse import parse_qs, urlsplit

import pytest

from aws_service_clients import (
    CLIENT_CLASSES,
    CloudWatchClient,
    CloudWatchEventsClient,
    EMRClient,
    GameSparksClient,
    GlueDataBrewClient,
    IoTFleetWiseClient,
    PinpointSMSVoiceV2Client,
    SESClient,
    ServiceRequest,
)
from aws_service_clients.models import CoreErrorType, HttpMethod, Protocol
from botocore import xform_name
from botocore.exceptions import ProfileNotFound

from aws_service_clients.models.operation import PathLiteral
from aws_service_clients.utils.service_data import load_service_model


ALL_CLIENTS = [
    GlueDataBrewClient,
    EMRClient,
    SESClient,
    CloudWatchEventsClient,
    GameSparksClient,
    IoTFleetWiseClient,
    CloudWatchClient,
    PinpointSMSVoiceV2Client,
]


class TestOperationTables:
    """Tests for the declared operation tables."""

    @pytest.mark.parametrize(
        "client_class,count",
        [
            (GlueDataBrewClient, 44),
            (EMRClient, 51),
            (SESClient, 71),
            (CloudWatchEventsClient, 51),
            (GameSparksClient, 33),
            (IoTFleetWiseClient, 50),
            (CloudWatchClient, 38),
            (PinpointSMSVoiceV2Client, 43),
        ],
    )
    def test_operation_count(self, client_class, count):
        assert len(client_class.OPERATIONS) == count
        assert len(set(client_class.operation_names())) == count

    @pytest.mark.parametrize("client_class", ALL_CLIENTS)
    def test_every_operation_has_three_methods(self, client_class):
        for name in client_class.operation_names():
            py_name = xform_name(name)
            assert callable(getattr(client_class, py_name))
            assert callable(getattr(client_class, f"{py_name}_callable"))
            assert callable(getattr(client_class, f"{py_name}_async"))

    @pytest.mark.parametrize("client_class", ALL_CLIENTS)
    def test_only_rest_clients_validate(self, client_class):
        assert client_class.VALIDATE_REQUIRED == (client_class.PROTOCOL == Protocol.REST_JSON)

    @pytest.mark.parametrize("client_class", ALL_CLIENTS)
    def test_rpc_operations_have_no_path(self, client_class):
        if client_class.PROTOCOL == Protocol.REST_JSON:
            pytest.skip("path-dispatched service")
        for operation in client_class.OPERATIONS:
            assert operation.http_method == HttpMethod.POST
            assert operation.path == ()

    @pytest.mark.parametrize("client_class", [GlueDataBrewClient, GameSparksClient])
    def test_path_params_are_required(self, client_class):
        for operation in client_class.OPERATIONS:
            assert set(operation.path_params()) <= set(operation.required), operation.name

    @pytest.mark.parametrize(
        "client_class",
        [c for c in ALL_CLIENTS if c.BOTOCORE_SERVICE_NAME],
    )
    def test_operations_exist_in_service_model(self, client_class):
        model = load_service_model(client_class.BOTOCORE_SERVICE_NAME)

        assert set(client_class.operation_names()) <= set(model.operation_names)

    def test_databrew_routes_match_service_model(self):
        model = load_service_model("databrew")

        for operation in GlueDataBrewClient.OPERATIONS:
            http = model.operation_model(operation.name).http
            assert operation.http_method.value == http["method"], operation.name
            members = model.operation_model(operation.name).input_shape.members
            template = "".join(
                part.text if isinstance(part, PathLiteral)
                else "{" + members[part.member].serialization.get("name", part.member) + "}"
                for part in operation.path
            )
            assert template == http["requestUri"].split("?")[0], operation.name

    def test_only_gamesparks_is_unmodeled(self):
        assert [c for c in ALL_CLIENTS if not c.BOTOCORE_SERVICE_NAME] == [GameSparksClient]

    def test_client_registry(self):
        assert set(CLIENT_CLASSES) == {
            "databrew", "elasticmapreduce", "email", "events",
            "gamesparks", "iotfleetwise", "monitoring", "sms-voice",
        }


class TestRestJsonServices:
    """Request shapes for DataBrew and GameSparks."""

    def test_databrew_list_job_runs(self, make_client):
        client, session = make_client(GlueDataBrewClient)

        client.list_job_runs(Name="daily", MaxResults=25)

        sent = session.last_request
        assert sent.method == "GET"
        assert sent.url == "https://databrew.us-east-1.amazonaws.com/jobs/daily/jobRuns?maxResults=25"

    def test_databrew_start_job_run(self, make_client):
        client, session = make_client(GlueDataBrewClient)

        client.start_job_run(Name="daily")

        assert session.last_request.method == "POST"
        assert session.last_request.url == "https://databrew.us-east-1.amazonaws.com/jobs/daily/startJobRun"

    def test_databrew_untag_resource(self, make_client):
        client, session = make_client(GlueDataBrewClient)

        client.untag_resource(ResourceArn="arn:aws:databrew:us-east-1:1:job/x", TagKeys=["team"])

        sent = session.last_request
        assert sent.method == "DELETE"
        assert sent.url == (
            "https://databrew.us-east-1.amazonaws.com/tags/"
            "arn%3Aaws%3Adatabrew%3Aus-east-1%3A1%3Ajob%2Fx?tagKeys=team"
        )

    def test_databrew_untag_requires_tag_keys(self, make_client):
        client, session = make_client(GlueDataBrewClient)

        outcome = client.untag_resource(ResourceArn="arn")

        assert outcome.error.message == "Missing required field [TagKeys]"
        assert session.call_count == 0

    def test_databrew_create_dataset_body(self, make_client):
        client, session = make_client(GlueDataBrewClient)

        client.create_dataset(Name="ds", Input={"S3InputDefinition": {"Bucket": "b"}})

        sent = session.last_request
        assert sent.url == "https://databrew.us-east-1.amazonaws.com/datasets"
        assert json.loads(sent.body) == {"Name": "ds", "Input": {"S3InputDefinition": {"Bucket": "b"}}}

    def test_databrew_wrong_member_type_not_sent(self, make_client):
        client, session = make_client(GlueDataBrewClient)

        outcome = client.list_jobs(MaxResults="ten")

        assert outcome.error.error_type == CoreErrorType.VALIDATION
        assert outcome.error.exception_name == "ParamValidationError"
        assert "MaxResults" in outcome.error.message
        assert session.call_count == 0

    def test_gamesparks_get_extension(self, make_client):
        client, session = make_client(GameSparksClient)

        client.get_extension(Namespace="custom", Name="leaderboard")

        assert session.last_request.url == (
            "https://gamesparks.us-east-1.amazonaws.com/extension/custom/leaderboard"
        )

    def test_gamesparks_disconnect_player(self, make_client):
        client, session = make_client(GameSparksClient)

        client.disconnect_player(GameName="g", StageName="dev", PlayerId="p1")

        assert session.last_request.method == "POST"
        assert session.last_request.url == (
            "https://gamesparks.us-east-1.amazonaws.com/runtime/game/g/stage/dev/player/p1/disconnect"
        )

    def test_gamesparks_update_game_uses_patch(self, make_client):
        client, session = make_client(GameSparksClient)

        client.update_game(GameName="g", Description="new")

        assert session.last_request.method == "PATCH"
        assert session.last_request.url == "https://gamesparks.us-east-1.amazonaws.com/game/g"


class TestJsonRpcServices:
    """Request shapes for the X-Amz-Target services."""

    @pytest.mark.parametrize(
        "client_class,method,target,host,content_type",
        [
            (EMRClient, "list_clusters", "ElasticMapReduce.ListClusters",
             "elasticmapreduce.us-east-1.amazonaws.com", "application/x-amz-json-1.1"),
            (CloudWatchEventsClient, "list_rules", "AWSEvents.ListRules",
             "events.us-east-1.amazonaws.com", "application/x-amz-json-1.1"),
            (IoTFleetWiseClient, "list_fleets", "IoTAutobahnControlPlane.ListFleets",
             "iotfleetwise.us-east-1.amazonaws.com", "application/x-amz-json-1.0"),
            (PinpointSMSVoiceV2Client, "describe_pools", "PinpointSMSVoiceV2.DescribePools",
             "sms-voice.us-east-1.amazonaws.com", "application/x-amz-json-1.0"),
        ],
    )
    def test_target_header(self, make_client, client_class, method, target, host, content_type):
        client, session = make_client(client_class)

        outcome = getattr(client, method)()

        assert outcome.is_success
        sent = session.last_request
        assert sent.method == "POST"
        assert sent.url == f"https://{host}/"
        assert sent.headers["X-Amz-Target"] == target
        assert sent.headers["Content-Type"] == content_type

    def test_emr_body(self, make_client):
        client, session = make_client(EMRClient)

        client.describe_cluster(ClusterId="j-123")

        assert json.loads(session.last_request.body) == {"ClusterId": "j-123"}


class TestQueryServices:
    """Request shapes and presigning for CloudWatch and SES."""

    def test_cloudwatch_form_body(self, make_client):
        client, session = make_client(CloudWatchClient)

        client.put_metric_data(
            Namespace="App",
            MetricData=[{"MetricName": "Latency", "Value": 1.5}],
        )

        sent = session.last_request
        assert sent.url == "https://monitoring.us-east-1.amazonaws.com/"
        assert parse_qs(sent.body.decode()) == {
            "Action": ["PutMetricData"],
            "Version": ["2010-08-01"],
            "Namespace": ["App"],
            "MetricData.member.1.MetricName": ["Latency"],
            "MetricData.member.1.Value": ["1.5"],
        }

    def test_ses_signing_name(self, make_client):
        client, session = make_client(SESClient)

        client.list_identities()

        sent = session.last_request
        assert sent.url == "https://email.us-east-1.amazonaws.com/"
        assert "/us-east-1/ses/aws4_request" in sent.headers["Authorization"]

    def test_ses_parses_xml_result(self, make_client, response):
        body = b"""<GetSendQuotaResponse xmlns="http://ses.amazonaws.com/doc/2010-12-01/">
          <GetSendQuotaResult>
            <Max24HourSend>200.0</Max24HourSend>
            <SentLast24Hours>1.0</SentLast24Hours>
          </GetSendQuotaResult>
          <ResponseMetadata><RequestId>abc</RequestId></ResponseMetadata>
        </GetSendQuotaResponse>"""
        client, _ = make_client(SESClient, responses=[response(200, body)])

        result = client.get_send_quota().get_result()

        assert result["Max24HourSend"] == 200.0
        assert result["SentLast24Hours"] == 1.0
        assert result["ResponseMetadata"]["RequestId"] == "abc"

    def test_presigned_url(self, make_client):
        client, session = make_client(SESClient)
        request = ServiceRequest(operation="SendEmail", params={"Source": "a@example.com"})

        url = client.convert_request_to_presigned_url(request, "eu-west-1")

        parts = urlsplit(url)
        query = parse_qs(parts.query)
        assert parts.netloc == "email.eu-west-1.amazonaws.com"
        assert query["Action"] == ["SendEmail"]
        assert query["Source"] == ["a@example.com"]
        assert query["X-Amz-Expires"] == ["3600"]
        assert "/eu-west-1/ses/aws4_request" in query["X-Amz-Credential"][0]
        assert session.call_count == 0

    def test_presigned_url_without_credentials(self, make_client):
        provider = MagicMock()
        provider.get_credentials.side_effect = ProfileNotFound(profile="missing")
        client, session = make_client(SESClient, credentials=None, credentials_provider=provider)

        url = client.convert_request_to_presigned_url(ServiceRequest(operation="ListIdentities"), "us-east-1")

        assert url == ""
        assert session.call_count == 0

    def test_presigned_url_invalid_member(self, make_client):
        client, _ = make_client(SESClient)

        assert client.convert_request_to_presigned_url(
            ServiceRequest(operation="ListIdentities", params={"MaxItems": "ten"}), "us-east-1"
        ) == ""

    def test_presigned_url_resolution_failure(self, make_client):
        client, _ = make_client(CloudWatchClient)

        assert client.convert_request_to_presigned_url(
            ServiceRequest(operation="ListMetrics"), "Bad Region"
        ) == ""

    def test_presigned_url_without_provider(self, make_client):
        client, _ = make_client(CloudWatchClient)
        client.endpoint_provider = None

        assert client.convert_request_to_presigned_url(
            ServiceRequest(operation="ListMetrics"), "us-east-1"
        ) == ""
