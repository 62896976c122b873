import pytest

from esb_httpapi.models.route import RouteTarget, TargetAlias


@pytest.fixture
def hello_target():
    return RouteTarget(function_name="hello")


@pytest.fixture
def users_target():
    return RouteTarget(function_name="users-api", alias=TargetAlias(name="live"))


@pytest.fixture
def service_yaml():
    return """
service: demo

provider:
  name: aws
  httpApi:
    cors: true

functions:
  hello:
    handler: handler.hello
    events:
      - httpApi: GET /hello
      - httpApi:
          method: post
          path: /hello
      - schedule: rate(5 minutes)
  users-api:
    handler: handler.users
    targetAlias:
      name: live
      logicalId: UsersApiAliasLive
    events:
      - httpApi:
          method: "*"
          path: /users/{id}

resources:
  Outputs:
    TableArn:
      Value: !GetAtt UsersTable.Arn
"""
