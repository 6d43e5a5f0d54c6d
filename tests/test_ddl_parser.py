import unittest

from entity_agent.config import GeneratorConfig
from entity_agent.parsers import parse_ddl

CLIENTE_DDL = """
CREATE TABLE VENDAS.TB_CLIENTE (
    NR_CLIENTE NUMBER(10) NOT NULL,
    NRCONTRATO NUMBER(5),
    DS_NOME VARCHAR2(100 BYTE) NOT NULL,
    VL_SALDO NUMBER(15, 2),
    DT_RESSARCIMENTO_CLIENTE DATE,
    OBSERVACAO CLOB,
    CONSTRAINT PK_TB_CLIENTE PRIMARY KEY (NR_CLIENTE, NRCONTRATO)
);
"""

# SQL Developer export: first column glued to "(", storage clauses after the body
EXPORT_DDL = """
  CREATE TABLE "APP"."TB_PAIS" 
   (	"CD_PAIS" NUMBER(3,0), 
	"NM_PAIS" VARCHAR2(60 BYTE), 
	 CONSTRAINT "PK_TB_PAIS" PRIMARY KEY ("CD_PAIS")
  USING INDEX PCTFREE 10 INITRANS 2 MAXTRANS 255 COMPUTE STATISTICS 
  STORAGE(INITIAL 65536 NEXT 1048576 MINEXTENTS 1 MAXEXTENTS 2147483645
  PCTINCREASE 0 FREELISTS 1 FREELIST GROUPS 1
  BUFFER_POOL DEFAULT FLASH_CACHE DEFAULT CELL_FLASH_CACHE DEFAULT)
  TABLESPACE "USERS"  ENABLE
   ) SEGMENT CREATION IMMEDIATE 
  PCTFREE 10 PCTUSED 40 INITRANS 1 MAXTRANS 255 
 NOCOMPRESS LOGGING
  STORAGE(INITIAL 65536 NEXT 1048576)
  TABLESPACE "USERS" ;
"""


class TestParseDDL(unittest.TestCase):
    def setUp(self):
        self.config = GeneratorConfig()

    def test_schema_and_table_are_captured_verbatim(self):
        model = parse_ddl(CLIENTE_DDL, self.config)
        self.assertEqual(model.schema, "VENDAS")
        self.assertEqual(model.original_name, "TB_CLIENTE")
        self.assertEqual(model.type_name, "Cliente")

    def test_columns_in_declaration_order(self):
        model = parse_ddl(CLIENTE_DDL, self.config)
        self.assertEqual(
            [c.original_name for c in model.columns],
            ["NR_CLIENTE", "NRCONTRATO", "DS_NOME", "VL_SALDO", "DT_RESSARCIMENTO_CLIENTE", "OBSERVACAO"],
        )
        self.assertEqual(
            [c.field_name for c in model.columns],
            ["nrCliente", "nrContrato", "dsNome", "vlSaldo", "dtRessarcimentoCliente", "observacao"],
        )

    def test_column_types_and_annotations(self):
        cols = {c.original_name: c for c in parse_ddl(CLIENTE_DDL, self.config).columns}
        self.assertEqual(cols["NR_CLIENTE"].target_type, "Long")
        self.assertEqual(cols["NRCONTRATO"].annotation, "@Min(0) @Max(99999)")
        self.assertEqual(cols["DS_NOME"].annotation, "@Size(max = 100)")
        self.assertEqual(cols["VL_SALDO"].annotation, "@Digits(integer = 13, fraction = 2)")
        self.assertEqual(cols["DT_RESSARCIMENTO_CLIENTE"].target_type, "LocalDateTime")
        self.assertEqual(cols["OBSERVACAO"].target_type, "String")
        self.assertEqual(cols["NR_CLIENTE"].type_name, "NrCliente")

    def test_composite_primary_key(self):
        model = parse_ddl(CLIENTE_DDL, self.config)
        self.assertEqual([c.original_name for c in model.id_columns], ["NR_CLIENTE", "NRCONTRATO"])
        self.assertTrue(model.has_composite_key)

    def test_without_schema_uses_default(self):
        model = parse_ddl("CREATE TABLE TB_PAIS (\n  CD_PAIS NUMBER(3)\n);", self.config)
        self.assertEqual(model.schema, "dbo")
        self.assertEqual(model.original_name, "TB_PAIS")
        self.assertEqual(model.type_name, "Pais")

    def test_without_create_table_uses_placeholder(self):
        model = parse_ddl("  CD_PAIS NUMBER(3),\n", self.config)
        self.assertEqual(model.schema, "dbo")
        self.assertEqual(model.original_name, "Unknown")
        self.assertEqual(model.type_name, "Unknown")
        self.assertEqual(len(model.columns), 1)

    def test_no_primary_key_clause(self):
        ddl = "CREATE TABLE TB_LOG (\n  ID_LOG NUMBER(12),\n  DS_MSG VARCHAR2(4000)\n);"
        model = parse_ddl(ddl, self.config)
        self.assertTrue(all(not c.is_id for c in model.columns))
        self.assertFalse(model.has_composite_key)

    def test_inline_primary_key(self):
        ddl = "CREATE TABLE TB_PAIS (\n  CD_PAIS NUMBER(3) PRIMARY KEY,\n  NM_PAIS VARCHAR2(60)\n);"
        model = parse_ddl(ddl, self.config)
        self.assertEqual([c.original_name for c in model.id_columns], ["CD_PAIS"])

    def test_standalone_primary_key_line_is_not_a_column(self):
        ddl = "CREATE TABLE TB_PAIS (\n  CD_PAIS NUMBER(3),\n  PRIMARY KEY (CD_PAIS)\n);"
        model = parse_ddl(ddl, self.config)
        self.assertEqual([c.original_name for c in model.columns], ["CD_PAIS"])
        self.assertTrue(model.columns[0].is_id)

    def test_only_first_primary_key_clause_is_used(self):
        ddl = (
            "CREATE TABLE T (\n  A NUMBER(1),\n  B NUMBER(1),\n"
            "  CONSTRAINT PK_T PRIMARY KEY (A),\n  CONSTRAINT UK_T PRIMARY KEY (B)\n);"
        )
        model = parse_ddl(ddl, self.config)
        self.assertEqual([c.original_name for c in model.id_columns], ["A"])

    def test_duplicate_columns_keep_first(self):
        ddl = "CREATE TABLE T (\n  A NUMBER(1),\n  A VARCHAR2(10),\n  B DATE\n);"
        model = parse_ddl(ddl, self.config)
        self.assertEqual([c.original_name for c in model.columns], ["A", "B"])
        self.assertEqual(model.columns[0].target_type, "Integer")
        self.assertEqual(model.duplicate_columns, ("A",))

    def test_noise_lines_are_skipped(self):
        ddl = (
            'CREATE TABLE "APP"."TB_ITEM" (\n'
            "  -- chave\n"
            "\n"
            '  "CD_ITEM" NUMBER(8),\n'
            "  KEY_VALUE VARCHAR2(10),\n"
            "  CONSTRAINT FK_ITEM FOREIGN KEY (CD_ITEM)\n"
            "    REFERENCES TB_OUTRA (CD_ITEM)\n"
            ") TABLESPACE USERS;\n"
        )
        model = parse_ddl(ddl, self.config)
        self.assertEqual(model.schema, "APP")
        self.assertEqual(model.original_name, "TB_ITEM")
        self.assertEqual([c.original_name for c in model.columns], ["CD_ITEM", "KEY_VALUE"])

    def test_export_first_column_after_paren(self):
        """여는 괄호 바로 뒤에 붙은 첫 컬럼도 읽는다"""
        model = parse_ddl(EXPORT_DDL, self.config)
        self.assertEqual(model.schema, "APP")
        self.assertEqual(model.original_name, "TB_PAIS")
        self.assertEqual([c.original_name for c in model.columns], ["CD_PAIS", "NM_PAIS"])
        self.assertTrue(model.columns[0].is_id)
        self.assertEqual(model.columns[0].annotation, "@Min(0) @Max(999)")
        self.assertEqual(model.columns[1].annotation, "@Size(max = 60)")

    def test_export_storage_clauses_are_not_columns(self):
        """본문을 닫는 ")" 뒤의 PCTFREE, NOCOMPRESS 와 STORAGE(...) 안쪽은 컬럼이 아니다"""
        model = parse_ddl(EXPORT_DDL, self.config)
        names = {c.original_name for c in model.columns}
        for noise in ("PCTFREE", "NOCOMPRESS", "PCTINCREASE", "BUFFER_POOL", "SEGMENT"):
            self.assertNotIn(noise, names)
        self.assertEqual(model.duplicate_columns, ())

    def test_leading_comma_style(self):
        ddl = (
            "CREATE TABLE TB_PAIS\n"
            "(\n"
            "    CD_PAIS NUMBER(3)\n"
            "  , NM_PAIS VARCHAR2(60)\n"
            "  , CONSTRAINT PK_PAIS PRIMARY KEY (CD_PAIS)\n"
            ")\n"
            "PCTFREE 10;\n"
        )
        model = parse_ddl(ddl, self.config)
        self.assertEqual(model.schema, "dbo")
        self.assertEqual([c.original_name for c in model.columns], ["CD_PAIS", "NM_PAIS"])
        self.assertTrue(model.columns[0].is_id)


if __name__ == "__main__":
    unittest.main()
