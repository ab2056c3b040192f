from lamcalc.utils.ast_utils import (ASTNode
                                     , TypeSpec
                                     , NUMBER_TYPE
                                     , VOID_TYPE
                                     , resolve_type_name
                                     , func_type
                                     , vector_type
                                     , matrix_type
                                     , is_declaration
                                     , children
                                     , walk)
from lamcalc.utils.print_utils import (type_to_str
                                       , expr_to_str
                                       , value_to_str
                                       , print_line_result
                                       , print_error)
