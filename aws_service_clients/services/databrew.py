# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""AWS Glue DataBrew client (REST-JSON, path dispatch)."""

from ..clients.base import AWSServiceClient
from ..models.enums import HttpMethod, Protocol
from ..models.operation import lit, param, rest

GET, POST, PUT, DELETE = HttpMethod.GET, HttpMethod.POST, HttpMethod.PUT, HttpMethod.DELETE

DATABREW_OPERATIONS = (
    rest("BatchDeleteRecipeVersion", POST, lit("/recipes/"), param("Name"), lit("/batchDeleteRecipeVersion"), required=("Name",)),
    rest("CreateDataset", POST, lit("/datasets")),
    rest("CreateProfileJob", POST, lit("/profileJobs")),
    rest("CreateProject", POST, lit("/projects")),
    rest("CreateRecipe", POST, lit("/recipes")),
    rest("CreateRecipeJob", POST, lit("/recipeJobs")),
    rest("CreateRuleset", POST, lit("/rulesets")),
    rest("CreateSchedule", POST, lit("/schedules")),
    rest("DeleteDataset", DELETE, lit("/datasets/"), param("Name"), required=("Name",)),
    rest("DeleteJob", DELETE, lit("/jobs/"), param("Name"), required=("Name",)),
    rest("DeleteProject", DELETE, lit("/projects/"), param("Name"), required=("Name",)),
    rest("DeleteRecipeVersion", DELETE, lit("/recipes/"), param("Name"), lit("/recipeVersion/"), param("RecipeVersion"), required=("Name", "RecipeVersion")),
    rest("DeleteRuleset", DELETE, lit("/rulesets/"), param("Name"), required=("Name",)),
    rest("DeleteSchedule", DELETE, lit("/schedules/"), param("Name"), required=("Name",)),
    rest("DescribeDataset", GET, lit("/datasets/"), param("Name"), required=("Name",)),
    rest("DescribeJob", GET, lit("/jobs/"), param("Name"), required=("Name",)),
    rest("DescribeJobRun", GET, lit("/jobs/"), param("Name"), lit("/jobRun/"), param("RunId"), required=("Name", "RunId")),
    rest("DescribeProject", GET, lit("/projects/"), param("Name"), required=("Name",)),
    rest("DescribeRecipe", GET, lit("/recipes/"), param("Name"), required=("Name",)),
    rest("DescribeRuleset", GET, lit("/rulesets/"), param("Name"), required=("Name",)),
    rest("DescribeSchedule", GET, lit("/schedules/"), param("Name"), required=("Name",)),
    rest("ListDatasets", GET, lit("/datasets")),
    rest("ListJobRuns", GET, lit("/jobs/"), param("Name"), lit("/jobRuns"), required=("Name",)),
    rest("ListJobs", GET, lit("/jobs")),
    rest("ListProjects", GET, lit("/projects")),
    rest("ListRecipeVersions", GET, lit("/recipeVersions"), required=("Name",)),
    rest("ListRecipes", GET, lit("/recipes")),
    rest("ListRulesets", GET, lit("/rulesets")),
    rest("ListSchedules", GET, lit("/schedules")),
    rest("ListTagsForResource", GET, lit("/tags/"), param("ResourceArn"), required=("ResourceArn",)),
    rest("PublishRecipe", POST, lit("/recipes/"), param("Name"), lit("/publishRecipe"), required=("Name",)),
    rest("SendProjectSessionAction", PUT, lit("/projects/"), param("Name"), lit("/sendProjectSessionAction"), required=("Name",)),
    rest("StartJobRun", POST, lit("/jobs/"), param("Name"), lit("/startJobRun"), required=("Name",)),
    rest("StartProjectSession", PUT, lit("/projects/"), param("Name"), lit("/startProjectSession"), required=("Name",)),
    rest("StopJobRun", POST, lit("/jobs/"), param("Name"), lit("/jobRun/"), param("RunId"), lit("/stopJobRun"), required=("Name", "RunId")),
    rest("TagResource", POST, lit("/tags/"), param("ResourceArn"), required=("ResourceArn",)),
    rest("UntagResource", DELETE, lit("/tags/"), param("ResourceArn"), required=("ResourceArn", "TagKeys")),
    rest("UpdateDataset", PUT, lit("/datasets/"), param("Name"), required=("Name",)),
    rest("UpdateProfileJob", PUT, lit("/profileJobs/"), param("Name"), required=("Name",)),
    rest("UpdateProject", PUT, lit("/projects/"), param("Name"), required=("Name",)),
    rest("UpdateRecipe", PUT, lit("/recipes/"), param("Name"), required=("Name",)),
    rest("UpdateRecipeJob", PUT, lit("/recipeJobs/"), param("Name"), required=("Name",)),
    rest("UpdateRuleset", PUT, lit("/rulesets/"), param("Name"), required=("Name",)),
    rest("UpdateSchedule", PUT, lit("/schedules/"), param("Name"), required=("Name",)),
)


class GlueDataBrewClient(AWSServiceClient):
    """Client for AWS Glue DataBrew."""

    SERVICE_NAME = "databrew"
    BOTOCORE_SERVICE_NAME = "databrew"
    SERVICE_CLIENT_NAME = "DataBrew"
    PROTOCOL = Protocol.REST_JSON
    VALIDATE_REQUIRED = True
    OPERATIONS = DATABREW_OPERATIONS
