"""GraphQL documents understood by the switchboard."""

# Drives

DRIVES_LIST_QUERY = """{
  driveDocuments {
    id
    name
  }
}"""

DRIVE_DETAIL_QUERY = """query DriveDocument($idOrSlug: String!) {
  driveDocument(idOrSlug: $idOrSlug) {
    id
    name
    documentType
    state {
      name
      nodes {
        ... on DocumentDrive_FolderNode {
          id name kind parentFolder
        }
        ... on DocumentDrive_FileNode {
          id name kind documentType parentFolder
        }
      }
    }
  }
}"""

DRIVE_OPERATIONS_QUERY = """query DriveOps($idOrSlug: String!, $first: Int!) {
  driveDocument(idOrSlug: $idOrSlug) {
    operations(skip: 0, first: $first) { type }
  }
}"""

DOCUMENT_OPERATIONS_QUERY = """query DocOps($documentId: String!) {
  documentOperations(documentId: $documentId) {
    documentId
    documentType
    operations { name module scope }
  }
}"""

# Groups

GROUPS_QUERY = """{
  groups {
    id name description members createdAt
  }
}"""

USER_GROUPS_QUERY = """query UserGroups($userAddress: String!) {
  userGroups(userAddress: $userAddress) {
    id name description members createdAt
  }
}"""

CREATE_GROUP_MUTATION = """mutation CreateGroup($name: String!, $description: String) {
  createGroup(name: $name, description: $description) {
    id name description members createdAt
  }
}"""

DELETE_GROUP_MUTATION = """mutation DeleteGroup($id: Int!) {
  deleteGroup(id: $id)
}"""

ADD_USER_TO_GROUP_MUTATION = """mutation AddUser($userAddress: String!, $groupId: Int!) {
  addUserToGroup(userAddress: $userAddress, groupId: $groupId)
}"""

REMOVE_USER_FROM_GROUP_MUTATION = """mutation RemoveUser($userAddress: String!, $groupId: Int!) {
  removeUserFromGroup(userAddress: $userAddress, groupId: $groupId)
}"""

# Roles

WHOAMI_QUERY = """query WhoAmI($address: String!) {
  whoami(address: $address) {
    address
    isAdmin
    isUser
    isGuest
  }
}"""

# Document permissions

DOCUMENT_ACCESS_QUERY = """query DocAccess($documentId: String!) {
  documentAccess(documentId: $documentId) {
    documentId
    permissions { documentId userAddress permission grantedBy }
    groupPermissions { documentId groupId group { id name } permission grantedBy }
  }
}"""

USER_DOCUMENT_PERMISSIONS_QUERY = """{
  userDocumentPermissions {
    documentId permission grantedBy createdAt
  }
}"""

GRANT_PERMISSION_MUTATION = """mutation Grant($documentId: String!, $userAddress: String!, $permission: DocumentPermissionLevel!) {
  grantDocumentPermission(documentId: $documentId, userAddress: $userAddress, permission: $permission) {
    documentId userAddress permission
  }
}"""

REVOKE_PERMISSION_MUTATION = """mutation Revoke($documentId: String!, $userAddress: String!) {
  revokeDocumentPermission(documentId: $documentId, userAddress: $userAddress)
}"""

GRANT_GROUP_PERMISSION_MUTATION = """mutation GrantGroup($documentId: String!, $groupId: Int!, $permission: DocumentPermissionLevel!) {
  grantGroupPermission(documentId: $documentId, groupId: $groupId, permission: $permission) {
    documentId groupId permission
  }
}"""

REVOKE_GROUP_PERMISSION_MUTATION = """mutation RevokeGroup($documentId: String!, $groupId: Int!) {
  revokeGroupPermission(documentId: $documentId, groupId: $groupId)
}"""

# Operation permissions

OPERATION_PERMISSIONS_QUERY = """query OpPerms($documentId: String!, $operationType: String!) {
  operationPermissions(documentId: $documentId, operationType: $operationType) {
    operationType
    userPermissions { userAddress grantedBy }
    groupPermissions { groupId group { id name } grantedBy }
  }
}"""

GRANT_OPERATION_PERMISSION_MUTATION = """mutation GrantOp($documentId: String!, $operationType: String!, $userAddress: String!) {
  grantOperationPermission(documentId: $documentId, operationType: $operationType, userAddress: $userAddress) {
    documentId operationType userAddress
  }
}"""

REVOKE_OPERATION_PERMISSION_MUTATION = """mutation RevokeOp($documentId: String!, $operationType: String!, $userAddress: String!) {
  revokeOperationPermission(documentId: $documentId, operationType: $operationType, userAddress: $userAddress)
}"""

GRANT_GROUP_OPERATION_PERMISSION_MUTATION = """mutation GrantGroupOp($documentId: String!, $operationType: String!, $groupId: Int!) {
  grantGroupOperationPermission(documentId: $documentId, operationType: $operationType, groupId: $groupId) {
    documentId operationType groupId
  }
}"""

REVOKE_GROUP_OPERATION_PERMISSION_MUTATION = """mutation RevokeGroupOp($documentId: String!, $operationType: String!, $groupId: Int!) {
  revokeGroupOperationPermission(documentId: $documentId, operationType: $operationType, groupId: $groupId)
}"""

# Connectivity check (GET request, bypasses the auth middleware)

TYPENAME_QUERY = "{ __typename }"
