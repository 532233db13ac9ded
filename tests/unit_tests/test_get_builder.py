"""
Unit tests for the GetBuilder class.
"""

import base64

import pytest

from vectorgql import (
    AskArgument,
    ConsistencyLevel,
    Field,
    Fields,
    GenerativeSearch,
    GetBuilder,
    GroupArgument,
    GroupByArgument,
    GroupType,
    NearImageArgument,
    NearTextArgument,
    NearVectorArgument,
    Operator,
    SortArgument,
    SortArguments,
    SortOrder,
    WhereArgument,
    WhereFilter,
)


@pytest.fixture
def name_fields():
    """Field selection with the name property only."""
    return Fields(Field("name"))


@pytest.fixture
def hawaii_filter():
    return WhereFilter(path=["name"], operator=Operator.EQUAL, value_text="Hawaii")


@pytest.fixture
def image_file(tmp_path):
    """A tiny PNG file on disk."""
    path = tmp_path / "pixel.png"
    path.write_bytes(
        base64.b64decode(
            "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk"
            "YPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
        )
    )
    return path


def test_build_simple_get(name_fields):
    query = GetBuilder(class_name="Pizza", fields=name_fields).build_query()
    assert query == "{Get{Pizza{name}}}"


def test_build_get_multiple_fields():
    fields = Fields(Field("name"), Field("description"))
    query = GetBuilder(class_name="Pizza", fields=fields).build_query()
    assert query == "{Get{Pizza{name description}}}"


def test_build_get_fields_from_names():
    query = GetBuilder(class_name="Pizza", fields=["name", "description"]).build_query()
    assert query == "{Get{Pizza{name description}}}"


def test_build_get_where_filter(name_fields, hawaii_filter):
    where1 = WhereArgument(hawaii_filter)
    where2 = WhereArgument(
        WhereFilter(
            operator=Operator.OR,
            operands=[
                hawaii_filter,
                WhereFilter(path=["name"], operator=Operator.EQUAL, value_text="Doener"),
            ],
        )
    )

    query1 = GetBuilder(class_name="Pizza", fields=name_fields, where=where1).build_query()
    query2 = GetBuilder(class_name="Pizza", fields=name_fields, where=where2).build_query()

    assert query1 == '{Get{Pizza(where:{path:["name"] valueText:"Hawaii" operator:Equal}){name}}}'
    assert query2 == (
        "{Get{Pizza"
        '(where:{operator:Or operands:[{path:["name"] valueText:"Hawaii" operator:Equal},'
        '{path:["name"] valueText:"Doener" operator:Equal}]})'
        "{name}}}"
    )


def test_build_get_where_filter_without_argument_wrapper(name_fields, hawaii_filter):
    """A bare WhereFilter or a filter dictionary is wrapped into a where argument."""
    expected = '{Get{Pizza(where:{path:["name"] valueText:"Hawaii" operator:Equal}){name}}}'

    query1 = GetBuilder(class_name="Pizza", fields=name_fields, where=hawaii_filter).build_query()
    query2 = GetBuilder(
        class_name="Pizza", fields=name_fields, where={"name": "Hawaii"}
    ).build_query()

    assert query1 == expected
    assert query2 == expected


def test_build_get_with_limit(name_fields):
    query = GetBuilder(class_name="Pizza", fields=name_fields, limit=2).build_query()
    assert query == "{Get{Pizza(limit:2){name}}}"


def test_build_get_with_limit_and_offset(name_fields):
    query = GetBuilder(class_name="Pizza", fields=name_fields, offset=0, limit=2).build_query()
    assert query == "{Get{Pizza(limit:2,offset:0){name}}}"


def test_build_get_with_limit_and_after(name_fields):
    query = GetBuilder(
        class_name="Pizza",
        fields=name_fields,
        after="00000000-0000-0000-0000-000000000000",
        limit=2,
    ).build_query()
    assert query == '{Get{Pizza(limit:2,after:"00000000-0000-0000-0000-000000000000"){name}}}'


def test_build_get_with_near_text(name_fields):
    near_text = NearTextArgument(concepts=["good"])
    query = GetBuilder(class_name="Pizza", fields=name_fields, near_text=near_text).build_query()
    assert query == '{Get{Pizza(nearText:{concepts:["good"]}){name}}}'


def test_build_get_with_near_vector(name_fields):
    with_certainty = NearVectorArgument(vector=[0, 1, 0.8], certainty=0.8)
    with_distance = NearVectorArgument(vector=[0, 1, 0.8], distance=0.8)

    query1 = GetBuilder(
        class_name="Pizza", fields=name_fields, near_vector=with_certainty
    ).build_query()
    query2 = GetBuilder(
        class_name="Pizza", fields=name_fields, near_vector=with_distance
    ).build_query()

    assert query1 == "{Get{Pizza(nearVector:{vector:[0.0,1.0,0.8] certainty:0.8}){name}}}"
    assert query2 == "{Get{Pizza(nearVector:{vector:[0.0,1.0,0.8] distance:0.8}){name}}}"


def test_build_get_with_group(name_fields):
    group = GroupArgument(type=GroupType.CLOSEST, force=0.4)
    query = GetBuilder(class_name="Pizza", fields=name_fields, group=group).build_query()
    assert query == "{Get{Pizza(group:{type:closest force:0.4}){name}}}"


def test_build_get_with_multiple_arguments(name_fields, hawaii_filter):
    query = GetBuilder(
        class_name="Pizza",
        fields=name_fields,
        near_text=NearTextArgument(concepts=["good"]),
        where=WhereArgument(hawaii_filter),
        limit=2,
    ).build_query()
    assert query == (
        '{Get{Pizza(where:{path:["name"] valueText:"Hawaii" operator:Equal},'
        'nearText:{concepts:["good"]},limit:2){name}}}'
    )


@pytest.mark.parametrize(
    "threshold, rendered",
    [({"certainty": 0.1}, "certainty:0.1"), ({"distance": 0.1}, "distance:0.1")],
)
def test_build_get_with_ask(name_fields, threshold, rendered):
    ask1 = AskArgument(question="Who are you?")
    ask2 = AskArgument(question="Who are you?", properties=["prop1", "prop2"])
    ask3 = AskArgument(question="Who are you?", properties=["prop1", "prop2"], **threshold)
    ask4 = AskArgument(
        question="Who are you?", properties=["prop1", "prop2"], rerank=True, **threshold
    )

    queries = [
        GetBuilder(class_name="Pizza", fields=name_fields, ask=ask).build_query()
        for ask in (ask1, ask2, ask3, ask4)
    ]

    assert queries[0] == '{Get{Pizza(ask:{question:"Who are you?"}){name}}}'
    assert queries[1] == (
        '{Get{Pizza(ask:{question:"Who are you?" properties:["prop1","prop2"]}){name}}}'
    )
    assert queries[2] == (
        '{Get{Pizza(ask:{question:"Who are you?" properties:["prop1","prop2"] '
        f"{rendered}}}){{name}}}}}}"
    )
    assert queries[3] == (
        '{Get{Pizza(ask:{question:"Who are you?" properties:["prop1","prop2"] '
        f"{rendered} rerank:true}}){{name}}}}}}"
    )


@pytest.mark.parametrize("threshold", ["certainty", "distance"])
def test_build_get_with_near_image(name_fields, image_file, threshold):
    expected_file_image = base64.b64encode(image_file.read_bytes()).decode("ascii")
    near_image1 = NearImageArgument(image_file=image_file)
    near_image2 = NearImageArgument(image_file=image_file, **{threshold: 0.4})
    near_image3 = NearImageArgument(
        image="data:image/png;base64,iVBORw0KGgoAAAANS", **{threshold: 0.1}
    )

    query1 = GetBuilder(class_name="Pizza", fields=name_fields, near_image=near_image1).build_query()
    query2 = GetBuilder(class_name="Pizza", fields=name_fields, near_image=near_image2).build_query()
    query3 = GetBuilder(
        class_name="Pizza", fields=name_fields, near_image=near_image3, limit=1
    ).build_query()

    assert query1 == f'{{Get{{Pizza(nearImage:{{image:"{expected_file_image}"}}){{name}}}}}}'
    assert query2 == (
        f'{{Get{{Pizza(nearImage:{{image:"{expected_file_image}" {threshold}:0.4}}){{name}}}}}}'
    )
    assert query3 == (
        f'{{Get{{Pizza(nearImage:{{image:"iVBORw0KGgoAAAANS" {threshold}:0.1}},limit:1){{name}}}}}}'
    )


def test_build_get_with_sort(name_fields):
    sort1 = SortArgument(path=["property1"])
    sort2 = SortArgument(path=["property2"], order=SortOrder.DESC)
    sort3 = SortArgument(path=["property3"], order="asc")

    query1 = GetBuilder(
        class_name="Pizza", fields=name_fields, sort=SortArguments(sort1)
    ).build_query()
    query2 = GetBuilder(
        class_name="Pizza", fields=name_fields, sort=SortArguments(sort1, sort2)
    ).build_query()
    query3 = GetBuilder(
        class_name="Pizza", fields=name_fields, sort=SortArguments(sort1, sort2, sort3)
    ).build_query()

    assert query1 == '{Get{Pizza(sort:[{path:["property1"]}]){name}}}'
    assert query2 == '{Get{Pizza(sort:[{path:["property1"]},{path:["property2"] order:desc}]){name}}}'
    assert query3 == (
        '{Get{Pizza(sort:[{path:["property1"]},{path:["property2"] order:desc},'
        '{path:["property3"] order:asc}]){name}}}'
    )


@pytest.mark.parametrize("level", [ConsistencyLevel.ALL, ConsistencyLevel.QUORUM, "ONE"])
def test_build_get_with_consistency_level(name_fields, level):
    query = GetBuilder(
        class_name="Pizza", fields=name_fields, consistency_level=level
    ).build_query()
    assert query == f"{{Get{{Pizza(consistencyLevel:{ConsistencyLevel(level).value}){{name}}}}}}"


def test_build_get_with_generative_search_merges_into_additional():
    fields = Fields(
        Field("name"),
        Field("description"),
        Field("_additional", [Field("id")]),
    )
    generative = GenerativeSearch(
        single_result_prompt="What is the meaning of life?",
        grouped_result_task="Explain why these magazines or newspapers are about finance",
    )

    query = GetBuilder(
        class_name="Pizza", fields=fields, generative_search=generative
    ).build_query()

    assert query == (
        "{Get{Pizza{name description _additional{id generate("
        'singleResult:{prompt:"""What is the meaning of life?"""} '
        'groupedResult:{task:"""Explain why these magazines or newspapers are about finance"""})'
        "{singleResult groupedResult error}}}}}"
    )
    # The builder's own field selection is left untouched
    assert fields.build() == "name description _additional{id}"


def test_build_get_with_generative_search_adds_additional():
    fields = Fields(Field("name"), Field("description"))
    generative = GenerativeSearch(
        single_result_prompt="What is the meaning of life?",
        grouped_result_task="Explain why these magazines or newspapers are about finance",
    )

    query = GetBuilder(
        class_name="Pizza", fields=fields, generative_search=generative
    ).build_query()

    assert query == (
        "{Get{Pizza{name description _additional{generate("
        'singleResult:{prompt:"""What is the meaning of life?"""} '
        'groupedResult:{task:"""Explain why these magazines or newspapers are about finance"""})'
        "{singleResult groupedResult error}}}}}"
    )


def test_build_get_with_generative_search_only():
    generative = GenerativeSearch(single_result_prompt="Describe {name}")
    query = GetBuilder(class_name="Pizza", fields=[], generative_search=generative).build_query()
    assert query == (
        '{Get{Pizza{_additional{generate(singleResult:{prompt:"""Describe {name}"""})'
        "{singleResult error}}}}}"
    )


def test_build_get_with_group_by():
    hits = [Field("prop1"), Field("_additional{distance}")]
    group = Field(
        "group",
        [
            Field("groupValue"),
            Field("count"),
            Field("maxDistance"),
            Field("minDistance"),
            Field("hits", hits),
        ],
    )
    fields = Fields(Field("_additional", [group]))

    query1 = GetBuilder(
        class_name="Pizza", fields=fields, group_by=GroupByArgument(path=["prop1"])
    ).build_query()
    query2 = GetBuilder(
        class_name="Pizza",
        fields=fields,
        group_by=GroupByArgument(path=["prop1"], groups=1, objects_per_group=3),
    ).build_query()

    assert query1 == (
        '{Get{Pizza(groupBy:{path:["prop1"]}){_additional{group{groupValue count maxDistance '
        "minDistance hits{prop1 _additional{distance}}}}}}}"
    )
    assert query2 == (
        '{Get{Pizza(groupBy:{path:["prop1"] groups:1 objectsPerGroup:3}){_additional{group{groupValue '
        "count maxDistance minDistance hits{prop1 _additional{distance}}}}}}}"
    )


def test_argument_order_is_fixed(name_fields, hawaii_filter):
    """Arguments render in a fixed order, independent of keyword order."""
    query = GetBuilder(
        class_name="Pizza",
        fields=name_fields,
        consistency_level="ALL",
        sort=SortArguments(SortArgument(path=["name"])),
        offset=1,
        limit=5,
        near_vector=NearVectorArgument(vector=[1.0]),
        where=hawaii_filter,
    ).build_query()
    assert query == (
        '{Get{Pizza(where:{path:["name"] valueText:"Hawaii" operator:Equal},'
        'nearVector:{vector:[1.0]},limit:5,offset:1,sort:[{path:["name"]}],'
        "consistencyLevel:ALL){name}}}"
    )


def test_get_builder_validation(name_fields):
    with pytest.raises(ValueError, match="Class name must be provided"):
        GetBuilder(class_name="", fields=name_fields)

    with pytest.raises(ValueError, match="limit must not be negative"):
        GetBuilder(class_name="Pizza", fields=name_fields, limit=-1)

    with pytest.raises(ValueError, match="offset must not be negative"):
        GetBuilder(class_name="Pizza", fields=name_fields, offset=-1)

    with pytest.raises(ValueError, match="At least one field must be selected"):
        GetBuilder(class_name="Pizza", fields=[]).build_query()


def test_str_builds_query(name_fields):
    builder = GetBuilder(class_name="Pizza", fields=name_fields, limit=1)
    assert str(builder) == "{Get{Pizza(limit:1){name}}}"


def test_single_field_name_is_not_split():
    query = GetBuilder(class_name="Pizza", fields="name").build_query()
    assert query == "{Get{Pizza{name}}}"
