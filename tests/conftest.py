"""Shared fixtures: a small blog schema and its type catalog."""

import pytest
from graphql import build_schema

from gql_gogen.core.catalog import TypeCatalog

SCHEMA_SDL = """
scalar DateTime

enum Role {
  ADMIN
  USER_ROLE
}

input NewPost {
  title: String!
  tags: [String!]!
  body: String
}

interface Node {
  id: ID!
}

type User implements Node {
  id: ID!
  name: String
  role: Role!
  posts: [Post]
  friends: [User!]!
  createdAt: DateTime
}

type Post implements Node {
  id: ID!
  title: String!
  tags: [String!]!
  author: User!
  matrix: [[Int]]
}

union SearchResult = User | Post

type Query {
  getUser(id: ID!): User
  users: [User!]!
  search(term: String!): [SearchResult]
  node(id: ID!): Node
}

type Mutation {
  createPost(input: NewPost!): Post!
}

type Subscription {
  postAdded: Post
}
"""


@pytest.fixture
def schema():
    return build_schema(SCHEMA_SDL)


@pytest.fixture
def catalog(schema):
    return TypeCatalog.from_schema(schema)


@pytest.fixture
def schema_sdl():
    return SCHEMA_SDL
